"""Main entry point for the translator."""

import argparse
import json
import sys

from PySide6.QtCore import QCoreApplication, QTimer

from lvtranslator.coordinators import TranslationCoordinator
from lvtranslator.core import SUPPORTED_LANGUAGES
from lvtranslator.io import JsonFileStore
from lvtranslator.services import (
    GeminiTranslationService,
    RateLimiter,
    SettingsManager,
    TranslationCache,
    check_health,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lvtranslator",
        description="Translate between Vietnamese, Lao and English.",
    )
    parser.add_argument("text", nargs="?", help="Text to translate")
    parser.add_argument("-s", "--source", choices=SUPPORTED_LANGUAGES, default="vi")
    parser.add_argument("-t", "--target", choices=SUPPORTED_LANGUAGES, default="lo")
    parser.add_argument("--health", action="store_true", help="Print health status and exit")
    parser.add_argument("--stats", action="store_true", help="Print cache statistics")
    return parser


def main(argv=None):
    """
    Bootstrap the translator following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    args = build_parser().parse_args(argv)

    # 1. Configuration
    settings = SettingsManager()

    if args.health:
        print(json.dumps(check_health(settings).as_dict(), indent=2))
        return 0

    # 2. Initialize Application
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("LVTranslator")

    # 3. Infrastructure and services
    cache = TranslationCache(max_size=settings.get_cache_max_size())
    store = JsonFileStore(settings.get_storage_dir())
    rate_limiter = RateLimiter(
        window_ms=settings.get_rate_limit_window_ms(),
        max_requests=settings.get_rate_limit_max_requests(),
    )

    # 4. Coordinator (Dependency Injection)
    coordinator = TranslationCoordinator(
        translation_cache=cache,
        translation_service=GeminiTranslationService(),
        settings_manager=settings,
        rate_limiter=rate_limiter,
        store=store,
    )
    coordinator.restore_cache()

    if not args.text:
        if args.stats:
            print(json.dumps(coordinator.cache_stats().as_dict(), indent=2))
        return 0

    exit_code = {"value": 0}

    def on_completed(text: str) -> None:
        print(text)
        app.quit()

    def on_failed(error: str) -> None:
        print(f"Error: {error}", file=sys.stderr)
        exit_code["value"] = 1
        app.quit()

    # 5. Signal wiring
    coordinator.translation_completed.connect(on_completed)
    coordinator.translation_failed.connect(on_failed)

    # 6. Run the request once the event loop is up
    QTimer.singleShot(
        0, lambda: coordinator.request_translation(args.text, args.source, args.target)
    )
    app.exec()

    coordinator.persist_cache()
    if args.stats:
        print(json.dumps(coordinator.cache_stats().as_dict(), indent=2))

    return exit_code["value"]


if __name__ == "__main__":
    sys.exit(main())
