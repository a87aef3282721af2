"""User-visible strings in English and Korean."""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    EN = "en"
    KO = "ko"


TRANSLATIONS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "appTitle": "Follow Manager",
        "not_mutual": "Not Mutual",
        "not_following": "I Don't Follow",
        "mutuals": "Mutuals",
        "following": "Following",
        "followers": "Followers",
        "emptyList": "List is empty",
        "noData": "No analysis yet. Use /analyze or /analyze_session first.",
        "reset": "Your cached follow data was cleared.",
        "dataLoaded": "Data loaded successfully",
        "invalidFile": "Invalid file format",
        "missingFiles": "Both followers and following files are required",
        "fetchError": "Failed to fetch data",
        "remoteDisabled": "Session analysis is not configured on this bot.",
        "unexpectedError": "Something went wrong while analyzing your data.",
        "sessionTitle": "Auto Follow Analysis",
        "sessionLabel": "Enter Session ID",
        "sessionPlaceholder": "Paste your session ID here",
        "fetchingData": "Fetching data...",
        "viewProfile": "View profile",
        "page": "Page",
        "previous": "Previous",
        "next": "Next",
    },
    Language.KO: {
        "appTitle": "팔로우 매니저",
        "not_mutual": "맞팔 안함",
        "not_following": "내가 안팔로우",
        "mutuals": "맞팔",
        "following": "팔로잉",
        "followers": "팔로워",
        "emptyList": "목록이 비어있습니다",
        "noData": "분석 결과가 없습니다. 먼저 /analyze 또는 /analyze_session 을 사용하세요.",
        "reset": "저장된 팔로우 데이터를 삭제했습니다.",
        "dataLoaded": "데이터가 로드되었습니다",
        "invalidFile": "올바른 형식의 파일이 아닙니다",
        "missingFiles": "팔로워와 팔로잉 파일 모두 필요합니다",
        "fetchError": "데이터를 가져오는데 실패했습니다",
        "remoteDisabled": "이 봇에는 세션 분석이 설정되어 있지 않습니다.",
        "unexpectedError": "데이터 분석 중 오류가 발생했습니다.",
        "sessionTitle": "자동 팔로우 분석",
        "sessionLabel": "세션 ID 입력",
        "sessionPlaceholder": "세션 ID를 붙여넣기 하세요",
        "fetchingData": "데이터를 가져오는 중...",
        "viewProfile": "프로필 보기",
        "page": "페이지",
        "previous": "이전",
        "next": "다음",
    },
}


def language_for(locale: object | None, default: Language | str = Language.EN) -> Language:
    """Pick Korean for ``ko*`` locales and ``default`` otherwise."""
    if locale is not None and str(getattr(locale, "value", locale)).lower().startswith("ko"):
        return Language.KO
    try:
        return Language(default)
    except ValueError:
        return Language.EN


def translate(key: str, lang: Language | str = Language.EN) -> str:
    """Look ``key`` up in ``lang``, falling back to English, then the key."""
    try:
        table = TRANSLATIONS[Language(lang)]
    except ValueError:
        table = TRANSLATIONS[Language.EN]
    return table.get(key) or TRANSLATIONS[Language.EN].get(key, key)
