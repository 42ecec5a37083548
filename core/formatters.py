# core/formatters.py

# all pure utilities & date/datetime helpers
# must never import from models!

import datetime

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_tag_list(tags: list[str]) -> str:
    return ", ".join(f"#{tag}" for tag in tags) if tags else "-"


def truncate(text: str, width: int = 40) -> str:
    text = " ".join(text.split())
    return text if len(text) <= width else text[: width - 3] + "..."


# === date formatters ===


def format_time(moment: datetime.datetime) -> str:
    return moment.strftime("%H:%M")


def format_date_iso(moment: datetime.date) -> str:
    return moment.strftime("%Y-%m-%d")


def format_date_for_language(moment: datetime.date, language: str) -> str:
    # eu reads year-first, es reads day-first
    return moment.strftime("%Y/%m/%d") if language == "eu" else moment.strftime("%d/%m/%Y")


def format_datetime_for_language(moment: datetime.datetime, language: str) -> str:
    return f"{format_date_for_language(moment, language)} {format_time(moment)}"


def format_month_and_year(month_name: str, year: int) -> str:
    line = "-" * 28
    return f"{line}\n{month_name} {year}\n{line}"


def parse_time_input(time_str: str | None) -> tuple[int, int]:
    """
    Splits a 24-hour `HH:MM` string into hours and minutes.

    Missing or non-numeric parts fall back to zero, so "" and None become (0, 0)
    and "14" becomes (14, 0).

    Raises:
        ValueError: If the parsed values are outside a 24-hour clock.
    """
    if not time_str:
        return 0, 0

    parts = time_str.strip().split(":")

    def to_int(part: str) -> int:
        try:
            return int(part)
        except ValueError:
            return 0

    hours = to_int(parts[0]) if parts else 0
    minutes = to_int(parts[1]) if len(parts) > 1 else 0

    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValueError("Invalid input. The time must be formatted as 24-hour HH:MM.")

    return hours, minutes


def parse_date_input(date_str: str) -> datetime.date:
    try:
        return datetime.datetime.strptime(date_str.strip(), "%Y-%m-%d").date()

    except (ValueError, AttributeError):
        raise ValueError(
            "Invalid input. The date must be formatted as YYYY-MM-DD."
        ) from None
