"""Translation Coordinator - Manages the cache-aside translate workflow."""

from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from lvtranslator.core import TranslationRequest
from lvtranslator.io import CACHE_STORAGE_KEY, JsonFileStore
from lvtranslator.services import (
    CachedTranslationService,
    CacheStats,
    RateLimiter,
    SettingsManager,
    TranslationCache,
    TranslationService,
    normalize_text,
)
from lvtranslator.services.api_workers import TranslationWorker


class _TranslationRequest(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(
        self,
        request: TranslationRequest,
        worker_id: int,
        parent: "TranslationCoordinator",
    ):
        super().__init__()
        self.request = request
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        """Handle translation result safely."""
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_result(result, self.request, self.worker_id)
            except RuntimeError:
                # Coordinator might be destroyed, ignore
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        """Handle translation error safely."""
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_error(error, self.worker_id)
            except RuntimeError:
                pass


class TranslationCoordinator(QObject):
    """
    Orchestrates translation requests.

    Responsibilities:
    - Validate requests and enforce the rate limit.
    - Serve cache hits immediately, otherwise run the translator in a worker.
    - Populate the cache with successful results.
    - Save and restore the cache through the persistent store.

    The coordinator owns its TranslationCache; there is no shared global
    instance.
    """

    RATE_LIMIT_IDENTIFIER = "local"

    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)

    def __init__(
        self,
        translation_cache: TranslationCache,
        translation_service: TranslationService,
        settings_manager: SettingsManager,
        rate_limiter: RateLimiter,
        store: Optional[JsonFileStore] = None,
    ):
        super().__init__()

        self.translation_cache = translation_cache
        self.translation_service = translation_service
        self.settings_manager = settings_manager
        self.rate_limiter = rate_limiter
        self.store = store
        self.cached_service = CachedTranslationService(translation_service, translation_cache)

        self.thread_pool = QThreadPool.globalInstance()

        # Results from workers other than the active one are stale
        self._active_translation_worker_id: Optional[int] = None
        self._worker_counter = 0

        # Keep the helper alive while its worker runs
        self._translation_request_helper: Optional[_TranslationRequest] = None

    def request_translation(self, text: str, source_lang: str, target_lang: str) -> None:
        """Translate text, answering from the cache when possible."""
        request = TranslationRequest(text=text, source_lang=source_lang, target_lang=target_lang)
        validation = request.validate()
        if not validation.valid:
            self.translation_failed.emit(validation.error or "Invalid request")
            return

        # A newer request supersedes any in-flight worker
        self._active_translation_worker_id = None
        self.translation_started.emit()

        sanitized = request.sanitized_text()
        hit = self.cached_service.lookup(sanitized, source_lang, target_lang)
        if hit is not None:
            self.translation_completed.emit(hit.text)
            return

        api_key = self._current_api_key()
        if not api_key:
            self.translation_failed.emit("API key not configured. Add GEMINI_API_KEY to .env file.")
            return

        status = self.rate_limiter.check(self.RATE_LIMIT_IDENTIFIER)
        if not status.allowed:
            self.translation_failed.emit(
                f"Rate limit exceeded. Please try again in {status.retry_after_seconds()} seconds."
            )
            return

        self._worker_counter += 1
        worker_id = self._worker_counter
        self._active_translation_worker_id = worker_id

        worker = TranslationWorker(
            translation_service=self.translation_service,
            text=normalize_text(sanitized),
            source_lang=source_lang,
            target_lang=target_lang,
            api_key=api_key,
        )

        request_helper = _TranslationRequest(request, worker_id, self)
        self._translation_request_helper = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)

        self.thread_pool.start(worker)

    def _handle_translation_result(self, result, request: TranslationRequest, worker_id: int) -> None:
        """
        Handle translation result from worker thread (runs in main thread).

        Args:
            result: Translation result object
            request: The request the worker was started for
            worker_id: ID of the worker that produced this result
        """
        if worker_id != self._active_translation_worker_id:
            print(f"[COORDINATOR] Ignoring stale translation result (worker {worker_id}, current {self._active_translation_worker_id})")
            return

        self._active_translation_worker_id = None

        if result.is_error:
            self.translation_failed.emit(result.error or "Unknown error")
            return

        self.cached_service.store(
            request.sanitized_text(), request.source_lang, request.target_lang, result
        )
        self.translation_completed.emit(result.text)

    def _handle_translation_error(self, error: str, worker_id: int) -> None:
        if worker_id != self._active_translation_worker_id:
            print(f"[COORDINATOR] Ignoring stale translation error (worker {worker_id}, current {self._active_translation_worker_id})")
            return

        self._active_translation_worker_id = None
        self.translation_failed.emit(error)

    def restore_cache(self) -> bool:
        """
        Load the persisted cache and drop entries past their TTL.

        Returns:
            True if a stored cache was imported.
        """
        if self.store is None:
            return False

        blob = self.store.load(CACHE_STORAGE_KEY)
        if blob is None:
            return False

        if not self.translation_cache.import_data(blob):
            return False

        expired = self.translation_cache.remove_older_than(self.settings_manager.get_cache_ttl_ms())
        print(f"[CACHE] Restored {len(self.translation_cache)} entries ({expired} expired)")
        return True

    def persist_cache(self) -> bool:
        """Save the cache to the persistent store."""
        if self.store is None:
            return False
        return self.store.save(CACHE_STORAGE_KEY, self.translation_cache.export())

    def cache_stats(self) -> CacheStats:
        return self.translation_cache.get_stats()

    def _current_api_key(self) -> Optional[str]:
        return self.settings_manager.get_gemini_api_key()
