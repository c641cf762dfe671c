"""Localized recommendation and verdict strings.

Supported locales: ``en`` and ``ja``. Unknown locales fall back to ``en``.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

DAY_NAMES: dict[str, list[str]] = {
    "en": ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
    "ja": ["日", "月", "火", "水", "木", "金", "土"],
}

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "optimal_send_time": "Sending on {day} around {hour}:00 is the most effective",
        "skill_match": "Skill match: {percent}%",
        "experience": "Experience: {years:g} years",
        "status": "Status: {status}",
        "no_recent_approach": "No recent approach",
        "recently_approached": "Approached {days} days ago",
        "no_history": "No approach history",
        "duplicate": (
            "Approached {days} days ago. "
            "Leave at least {interval} days between approaches."
        ),
        "not_duplicate": "{days} days since the last approach.",
        "freelance_available": "Approach allowed.",
        "freelance_blocked": (
            "Only {days} days since the last approach. "
            "Wait {remaining} more days."
        ),
        "freelance_allowed": "{days} days since the last approach. Approach allowed.",
        "top_template": 'Template "{name}" is the most effective (conversion {percent}%)',
        "top_hour": "Sending around {hour}:00 is the most effective (conversion {percent}%)",
        "top_day": "Sending on {day} is the most effective (conversion {percent}%)",
        "low_conversion": (
            "Conversion rate is low. Review approach content and targeting."
        ),
    },
    "ja": {
        "optimal_send_time": "{day}曜日の{hour}時頃の送信が最も効果的です",
        "skill_match": "スキルマッチ: {percent}%",
        "experience": "経験年数: {years:g}年",
        "status": "ステータス: {status}",
        "no_recent_approach": "最近のアプローチなし",
        "recently_approached": "{days}日前にアプローチ済み",
        "no_history": "アプローチ履歴なし",
        "duplicate": "{days}日前にアプローチ済みです。最低{interval}日間隔を空けてください。",
        "not_duplicate": "前回のアプローチから{days}日経過しています。",
        "freelance_available": "アプローチ可能です",
        "freelance_blocked": (
            "前回のアプローチから{days}日しか経過していません。あと{remaining}日お待ちください。"
        ),
        "freelance_allowed": "前回のアプローチから{days}日経過しています。アプローチ可能です。",
        "top_template": "「{name}」テンプレートが最も効果的です（成約率{percent}%）",
        "top_hour": "{hour}時台の送信が最も効果的です（成約率{percent}%）",
        "top_day": "{day}曜日の送信が最も効果的です（成約率{percent}%）",
        "low_conversion": "成約率が低いため、アプローチ内容やターゲティングの見直しを推奨します",
    },
}


def resolve_locale(locale: str | None) -> str:
    """Return a supported locale, falling back to the default."""
    key = (locale or DEFAULT_LOCALE).strip().lower()
    if key not in MESSAGES:
        logger.warning("Unsupported locale %r; falling back to %s", locale, DEFAULT_LOCALE)
        return DEFAULT_LOCALE
    return key


def day_name(day_of_week: int, locale: str | None = None) -> str:
    return DAY_NAMES[resolve_locale(locale)][day_of_week]


def as_percent(rate: float) -> int:
    """Round a 0..1 rate to a whole percent (half rounds up)."""
    return math.floor(rate * 100 + 0.5)


def format_message(key: str, locale: str | None = None, **kwargs: object) -> str:
    """Format a catalog message for locale."""
    return MESSAGES[resolve_locale(locale)][key].format(**kwargs)
