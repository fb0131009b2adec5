# File: icon_scout/report/html_report.py
"""icon_scout.report.html_report: HTML-превью найденной иконки с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from icon_scout.models import GENERATED_SOURCE, SiteIcons

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def render_html(
    result: SiteIcons,
    template_dir: Union[Path, str, None],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит HTML-страницу со всеми размерами иконки и сохраняет её.

    Args:
        result: объект SiteIcons.
        template_dir: директория с шаблоном ``report.html.j2``
            (None: шаблон из пакета).
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "title": result.title,
        "description": result.description,
        "url": result.url,
        "favicon_url": result.favicon_url,
        "generated": result.favicon_url == GENERATED_SOURCE,
        "favicons": sorted(result.favicons.items(), key=lambda item: int(item[0])),
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
