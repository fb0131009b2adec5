# icon_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта IconScout.

Сериализация объекта SiteIcons в файл.
"""
import json
from pathlib import Path

from icon_scout.models import SiteIcons


def render_json(result: SiteIcons, output_path: Path | str, pretty: bool = True) -> Path:
    """
    Сохраняет результат поиска result в формате JSON по указанному пути.

    :param result: объект SiteIcons (метаданные страницы и иконки)
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла

    Пример:
    ```python
    from icon_scout.report.json_report import render_json
    report_path = render_json(result, 'reports/icons.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
