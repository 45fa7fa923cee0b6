"""
Нормализация текста страниц каталога.

Чистые функции без состояния: перестановка имён авторов, разбиение
блока на строки по <br>, словарь "ключ: значение" с канонизацией ключей,
переформатирование аннотации и поиск подстрок по шаблонам.

Сайт отдаёт разметку в ISO-8859-1 с непоследовательным кодированием
акцентированных символов, поэтому ключи полей сводятся к латинским буквам.
"""

import re
from typing import Dict, Iterable, List, Optional

from bs4 import Comment, NavigableString, Tag

ORDINAL_RE = re.compile(r"^\d+\.\s*")
NON_LETTER_RE = re.compile(r"[^A-Za-z]")
YEAR_RE = re.compile(r"(?<![0-9])([12][0-9]{3})(?![0-9])")
# ImgSrc[1]="/imagem/imagem.dll?pro_id=1386929&PIM_Id=658849";
IMG_SRC_RE = re.compile(r'ImgSrc\[[0-9]\]="([^"]+)"')
SPACES_RE = re.compile(r" {2,}")

WORDS_PER_LINE = 10
LINE_BREAK = "\r\n"


def _is_text(node) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, Comment)


def authors_to_list(authors: str) -> List[str]:
    """
    Преобразует "Фамилия, Имя; Фамилия, Имя" в список "Имя Фамилия".

    Пример:
        >>> authors_to_list("Silva, João; Costa, Maria")
        ['João Silva', 'Maria Costa']
    """
    result = []
    for author in authors.split(";"):
        author = author.strip()
        if not author:
            continue
        last, sep, first = author.partition(",")
        if not sep:
            # Имя без запятой (например, псевдоним) оставляем как есть
            result.append(author)
            continue
        result.append(f"{first.strip()} {last.strip()}".strip())
    return result


def strip_ordinal(title: str) -> str:
    """Удаляет порядковый номер в начале строки ("12. Título" -> "Título")."""
    return ORDINAL_RE.sub("", title, count=1)


def first_non_empty_text(elem: Tag) -> str:
    """
    Первый непустой текстовый узел среди прямых потомков элемента.

    Вложенные теги (<b>, <i> и т.п.) пропускаются.
    """
    for node in elem.children:
        if not _is_text(node):
            continue
        text = str(node).strip()
        if text:
            return text
    return ""


def text_with_breaks(elem: Tag) -> str:
    """Текст элемента, где каждый <br> заменён переводом строки."""
    parts = []
    for node in elem.descendants:
        if _is_text(node):
            parts.append(str(node))
        elif isinstance(node, Tag) and node.name == "br":
            parts.append("\n")
    return "".join(parts)


def lines_of_text(elem: Tag) -> List[str]:
    """
    Разбивает содержимое блока на строки по тегам <br>.

    Текст вложенных тегов добавляется к текущей строке. Строки обрезаются,
    пустые отбрасываются.
    """
    lines = []
    current = ""
    for node in elem.children:
        if _is_text(node):
            current += str(node)
        elif isinstance(node, Tag):
            if node.name == "br":
                lines.append(current.strip())
                current = ""
            else:
                current += node.get_text()
    lines.append(current.strip())
    return [line for line in lines if line]


def canonical_key(key: str) -> str:
    """Оставляет в ключе только латинские буквы ("Edição" -> "Edio")."""
    return NON_LETTER_RE.sub("", key)


def lines_to_map(lines: Iterable[str]) -> Dict[str, str]:
    """
    Словарь из строк вида "Ключ: Значение".

    Разбиение по первому двоеточию; строки без двоеточия пропускаются.
    При совпадении канонических ключей побеждает последняя строка.
    """
    result = {}
    for line in lines:
        key, sep, value = line.partition(":")
        if not sep:
            continue
        result[canonical_key(key)] = value.strip()
    return result


def extract_publish_year(text: Optional[str]) -> Optional[int]:
    """Первое четырёхзначное число в диапазоне 1000-2999 или None."""
    if not text:
        return None
    match = YEAR_RE.search(text)
    if match:
        return int(match.group(1))
    return None


def find_image_path(script_text: str) -> Optional[str]:
    """
    Путь к обложке из присваивания ImgSrc[N]="..." во встроенном скрипте.

    Возвращает путь от корня сайта (с ведущим /) или None.
    """
    for line in script_text.splitlines():
        match = IMG_SRC_RE.search(line)
        if match:
            path = match.group(1)
            if not path.startswith("/"):
                path = "/" + path
            return path
    return None


def absolute_url(site: str, link: str) -> str:
    """Ссылка относительно корня сайта -> абсолютный URL."""
    if link.startswith(("http://", "https://")):
        return link
    if not link.startswith("/"):
        link = "/" + link
    return f"{site}{link}"


def collapse_whitespace(text: str) -> str:
    """CRLF -> пробел, повторяющиеся пробелы -> один."""
    return SPACES_RE.sub(" ", text.replace("\r\n", " "))


def reflow(text: str, words_per_line: int = WORDS_PER_LINE) -> str:
    """
    Переформатирует текст по words_per_line слов в строке.

    После каждого слова ставится пробел, после каждого десятого - CRLF.
    Пробел после последнего слова неполной строки сохраняется.
    """
    result = []
    count = 0
    for word in text.split():
        count += 1
        result.append(word)
        if count == words_per_line:
            count = 0
            result.append(LINE_BREAK)
        else:
            result.append(" ")
    return "".join(result)
