"""Gemini Translation Service - Implements translation via Google Gemini API."""

import time
from datetime import datetime

import google.genai as genai
from google.genai import types

from lvtranslator.core.languages import language_name
from lvtranslator.services.translation.translation_service import TranslationResult, TranslationService


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    Low temperature keeps repeated translations of the same text stable,
    which is what makes caching them worthwhile.
    """

    MODEL_NAME = "gemini-2.0-flash"

    MAX_RETRIES = 3
    INITIAL_RETRY_DELAY = 2

    TRANSLATION_PROMPT = """Translate the following text from {source} to {target}. Provide ONLY the translation, without any explanations or additional text.

Text to translate: {text}"""

    def build_prompt(self, text: str, source_lang: str, target_lang: str) -> str:
        return self.TRANSLATION_PROMPT.format(
            source=language_name(source_lang),
            target=language_name(target_lang),
            text=text,
        )

    def translate(
        self, text: str, source_lang: str, target_lang: str, api_key: str
    ) -> TranslationResult:
        """
        Translate text using Gemini API.

        Rate-limit errors are retried with exponential backoff; every other
        failure is returned as an error result.
        """
        retry_delay = self.INITIAL_RETRY_DELAY
        attempt = 0

        while attempt < self.MAX_RETRIES:
            attempt += 1
            try:
                client = genai.Client(api_key=api_key)

                prompt = self.build_prompt(text, source_lang, target_lang)

                print(f"\n[TRANSLATION REQUEST]")
                print(f"Attempt: {attempt}/{self.MAX_RETRIES}")
                print(f"Model: {self.MODEL_NAME}")
                print(f"Direction: {source_lang} -> {target_lang}")
                print(f"Input text: {repr(text[:100])}" + ("..." if len(text) > 100 else ""))
                print(f"Timestamp: {datetime.now().isoformat()}")
                print(f"{'-' * 50}")

                response = client.models.generate_content(
                    model=self.MODEL_NAME,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        temperature=0.3,
                        top_p=0.95,
                        top_k=40,
                        max_output_tokens=2048,
                    ),
                )

                if not response.text:
                    return TranslationResult(
                        text="",
                        model=self.MODEL_NAME,
                        error="Empty response from API",
                    )

                print(f"[TRANSLATION SUCCESS] Response received on attempt {attempt}")
                print(f"Response length: {len(response.text)} chars")

                return TranslationResult(
                    text=response.text.strip(),
                    model=self.MODEL_NAME,
                )

            except Exception as e:
                error_msg = str(e).lower()

                print(f"\n[TRANSLATION ERROR]")
                print(f"Attempt: {attempt}/{self.MAX_RETRIES}")
                print(f"Exception type: {type(e).__name__}")
                print(f"Error message: {str(e)}")

                is_rate_limit = (
                    "429" in error_msg
                    or "resource_exhausted" in error_msg
                    or "quota" in error_msg
                    or "rate_limit" in error_msg
                )

                if is_rate_limit and attempt < self.MAX_RETRIES:
                    print(f"Rate limit detected. Retrying in {retry_delay} seconds...")
                    time.sleep(retry_delay)
                    retry_delay *= 2
                    continue

                if "api_key" in error_msg or "authentication" in error_msg or "invalid" in error_msg:
                    return TranslationResult(
                        text="",
                        model=self.MODEL_NAME,
                        error=f"Invalid API key or request: {str(e)}",
                    )
                elif is_rate_limit:
                    return TranslationResult(
                        text="",
                        model=self.MODEL_NAME,
                        error="API quota exceeded. Please try again later.",
                    )
                elif "deadline" in error_msg or "timeout" in error_msg:
                    return TranslationResult(
                        text="",
                        model=self.MODEL_NAME,
                        error="Request timed out. Please check your connection.",
                    )
                else:
                    return TranslationResult(
                        text="",
                        model=self.MODEL_NAME,
                        error=f"Translation failed: {str(e)}",
                    )

        return TranslationResult(
            text="",
            model=self.MODEL_NAME,
            error="Translation failed after retries",
        )
