"""
Модуль сетевых операций для GlossaryTree.

Обрабатывает:
- Единственный HTTP запрос приложения: загрузка JSON документа глоссария
- Retry стратегию и переиспользование соединений (requests.Session)
- Трансляцию любых сбоев загрузки в FetchError

КРИТИЧНО:
- Документ загружается ОДИН раз за сессию, повторов после ошибки нет
- Кэш HTTP обходится (Cache-Control: no-cache), офлайн-кэша нет
"""
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
import datetime
from typing import List, Optional

# ===== НАСТРОЙКИ ОТЛАДКИ =====
#DEBUG_NETWORK = False  # <--- ВКЛЮЧИТЕ FALSE, ЧТОБЫ УБРАТЬ ЛОГИ В КОНСОЛИ
DEBUG_NETWORK = True  # <--- ВКЛЮЧИТЕ True, ЧТОБЫ ПОКАЗАТЬ ЛОГИ В КОНСОЛИ

# ===== КОНСТАНТЫ =====
DEFAULT_TIMEOUT = 10  # seconds


# ===== ИСКЛЮЧЕНИЯ =====
class FetchError(Exception):
    """
    Загрузка глоссария не удалась.

    Причины: сетевая ошибка, не-2xx статус, битый JSON, документ не является массивом.
    Исходное исключение доступно как .cause (и __cause__ при raise ... from).
    """

    def __init__(self, message: str, url: str = "", cause: Optional[BaseException] = None):
        super().__init__(message)
        self.url = url
        self.cause = cause


# ===== УПРАВЛЕНИЕ СЕССИЯМИ =====
def _log_response(response, *args, **kwargs):
    """Хук requests: время запроса и ответа в консоль"""
    now = datetime.datetime.now()
    start_time = now - response.elapsed

    method = response.request.method
    url = response.url
    if len(url) > 250:
        url = url[:247] + "..."

    print(f"[{start_time.strftime('%H:%M:%S.%f')[:-3]}] -> REQ: {method} {url}")
    print(f"[{now.strftime('%H:%M:%S.%f')[:-3]}] <- RES: {response.status_code} (took {response.elapsed.total_seconds():.3f}s)")


def _create_session(max_retries=2, backoff_factor=0.2):
    """Создает HTTP session с логгером и retry стратегией"""
    session = requests.Session()

    retry_strategy = Retry(
        total=max_retries,
        backoff_factor=backoff_factor,
        status_forcelist=[429, 502, 503, 504],
        allowed_methods=["HEAD", "GET", "OPTIONS"]
    )

    adapter = HTTPAdapter(max_retries=retry_strategy)

    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({
        "User-Agent": "GlossaryTree/1.0 (Python/requests)",
        "Cache-Control": "no-cache"
    })

    if DEBUG_NETWORK:
        session.hooks['response'] = [_log_response]

    return session


# Глобальная сессия для переиспользования соединения
session_glossary = _create_session()


# ═══════════════════════════════════════════════════════════════════════════
# ГЛОССАРИЙ
# ═══════════════════════════════════════════════════════════════════════════

def fetch_glossary(url: str, timeout: float = DEFAULT_TIMEOUT) -> List:
    """
    Загружает JSON массив записей глоссария.

    Args:
        url: Адрес JSON документа
        timeout: Таймаут запроса в секундах

    Returns:
        Список сырых записей (dict) в порядке документа

    Raises:
        FetchError: при сетевой ошибке, не-2xx статусе, битом JSON или не-массиве
    """
    try:
        resp = session_glossary.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"Request failed: {exc}", url=url, cause=exc) from exc

    if not resp.ok:
        error = requests.HTTPError(f"HTTP error! status: {resp.status_code}", response=resp)
        raise FetchError(str(error), url=url, cause=error) from error

    try:
        data = resp.json()
    except ValueError as exc:
        raise FetchError("Malformed JSON document", url=url, cause=exc) from exc

    if not isinstance(data, list):
        error = ValueError(f"Expected a JSON array, got {type(data).__name__}")
        raise FetchError(str(error), url=url, cause=error) from error

    return data


# ═══════════════════════════════════════════════════════════════════════════
# CLEANUP
# ═══════════════════════════════════════════════════════════════════════════

def close_all_sessions():
    """Закрывает HTTP сессию при завершении приложения"""
    session_glossary.close()
