"""Locale-specific strings for notes and user-facing messages."""

from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    """Supported note languages."""

    EN = "en"
    RU = "ru"

    @classmethod
    def parse(cls, value: "str | Language | None") -> "Language":
        """Parse a language code, falling back to English."""
        if isinstance(value, Language):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.EN


@dataclass(frozen=True)
class TemplateStrings:
    description_header: str
    my_idea_header: str
    my_idea_placeholder: str
    optimal_solution_header: str
    optimal_solution_placeholder: str
    similar_header: str
    solutions_header: str
    description_unavailable: str


@dataclass(frozen=True)
class Messages:
    """Messages returned to API callers."""

    resolve_slug_fail: str
    fetch_error: str
    created: str
    create_file_fail: str
    note_not_found: str
    resolve_from_file_fail: str
    no_cookies: str
    no_accepted: str
    updated: str
    unchanged: str
    import_error: str
    path_conflict: str


TEMPLATE_STRINGS: dict[Language, TemplateStrings] = {
    Language.EN: TemplateStrings(
        description_header="Description",
        my_idea_header="My idea",
        my_idea_placeholder="(your plan)",
        optimal_solution_header="Optimal solution",
        optimal_solution_placeholder="(notes)",
        similar_header="Similar questions",
        solutions_header="Solutions",
        description_unavailable="(description unavailable or disabled)",
    ),
    Language.RU: TemplateStrings(
        description_header="Описание",
        my_idea_header="Моя идея",
        my_idea_placeholder="(ваш план)",
        optimal_solution_header="Оптимальное решение",
        optimal_solution_placeholder="(конспект)",
        similar_header="Похожие вопросы",
        solutions_header="Решения",
        description_unavailable="(описание недоступно или отключено)",
    ),
}

# Every header the merger recognizes as the solutions section, whatever the note language.
SOLUTIONS_HEADERS: dict[Language, str] = {
    language: strings.solutions_header for language, strings in TEMPLATE_STRINGS.items()
}

MESSAGES: dict[Language, Messages] = {
    Language.EN: Messages(
        resolve_slug_fail="Could not resolve problem (check link or number)",
        fetch_error="Failed to fetch data",
        created="Created",
        create_file_fail="Failed to create file",
        note_not_found="Note not found",
        resolve_from_file_fail="Could not resolve problem (no link in frontmatter)",
        no_cookies="Set csrftoken and LEETCODE_SESSION in settings",
        no_accepted="No Accepted solutions found",
        updated="Solutions updated",
        unchanged="No new solutions",
        import_error="Failed to import solution",
        path_conflict="Path {path} is already a file.",
    ),
    Language.RU: Messages(
        resolve_slug_fail="Не удалось определить задачу (проверьте ссылку или номер)",
        fetch_error="Ошибка получения данных",
        created="Создано",
        create_file_fail="Не удалось создать файл",
        note_not_found="Заметка не найдена",
        resolve_from_file_fail="Не удалось определить задачу (нет ссылки в frontmatter)",
        no_cookies="Укажите csrftoken и LEETCODE_SESSION в настройках",
        no_accepted="Accepted решения не найдены",
        updated="Решения обновлены",
        unchanged="Новых решений нет",
        import_error="Не удалось импортировать решение",
        path_conflict="Путь {path} уже занят файлом.",
    ),
}


def get_template_strings(language: "str | Language | None" = Language.EN) -> TemplateStrings:
    return TEMPLATE_STRINGS[Language.parse(language)]


def get_messages(language: "str | Language | None" = Language.EN) -> Messages:
    return MESSAGES[Language.parse(language)]
