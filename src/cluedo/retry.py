"""
Retry helpers for LLM calls.

Model providers fail intermittently (rate limits, overloaded models, empty
responses), so every agent decision goes through `retry_with_backoff`.
"""

import logging
import time

from cluedo.config import debug_enabled

logger = logging.getLogger(__name__)


def get_error_details(exception):
    """
    Extract detailed error information from an exception.

    Args:
        exception: The exception to analyze

    Returns:
        A formatted string with error details
    """
    error_info = []
    error_info.append(f"Type: {type(exception).__name__}")
    error_info.append(f"Message: {str(exception)}")

    if getattr(exception, '__cause__', None):
        error_info.append(f"Caused by: {type(exception.__cause__).__name__}: {exception.__cause__}")

    # HTTP-style API errors
    if hasattr(exception, 'status_code'):
        error_info.append(f"Status Code: {exception.status_code}")
    if hasattr(exception, 'response'):
        response = exception.response
        if hasattr(response, 'status_code'):
            error_info.append(f"Response Status: {response.status_code}")
        if isinstance(getattr(response, 'text', None), str):
            error_info.append(f"Response Body: {response.text[:500]}")

    if hasattr(exception, 'code'):
        error_info.append(f"Error Code: {exception.code}")
    if hasattr(exception, 'error'):
        error_info.append(f"Error Details: {exception.error}")

    if len(exception.args) > 1:
        error_info.append(f"Additional Args: {exception.args[1:]}")

    if "empty response" in str(exception).lower():
        error_info.append("Possible causes: safety filter blocked response, quota exceeded or model overloaded")

    return " | ".join(error_info)


def retry_with_backoff(func, max_retries=3, base_delay=5):
    """
    Retry a function with exponential backoff.

    Args:
        func: Callable to retry
        max_retries: Maximum number of retry attempts
        base_delay: Base delay in seconds (doubled after every failure)

    Returns:
        The result of the function call

    Raises:
        The last exception if all retries fail
    """
    last_exception = None

    for attempt in range(max_retries + 1):
        try:
            result = func()
            if result is None or (hasattr(result, 'raw') and not result.raw):
                raise ValueError(f"Empty response from LLM (result type: {type(result).__name__})")
            return result
        except Exception as e:
            last_exception = e
            error_details = get_error_details(e)

            if attempt < max_retries:
                delay = base_delay * (2 ** attempt)
                logger.warning(f"Attempt {attempt + 1}/{max_retries + 1} failed: {error_details}")
                logger.warning(f"Retrying in {delay} seconds...")
                time.sleep(delay)
            else:
                logger.error(f"All {max_retries + 1} attempts failed: {error_details}",
                             exc_info=debug_enabled())
    raise last_exception
