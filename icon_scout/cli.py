#!/usr/bin/env python3
"""
Точка входа для запуска IconScout через командную строку.

Команды:
  lookup URL  Найти иконку сайта и вывести/сохранить результат
  config      Показать текущую конфигурацию
  serve       Запустить HTTP API

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда lookup опции:
  --json PATH            Сохранить JSON-результат в файл
  --html PATH            Сохранить HTML-превью в файл
  --template DIR         Папка с Jinja2-шаблоном report.html.j2
  --pretty               Преформатировать JSON-вывод (отступ 2)
  --lookup-timeout SEC   Таймаут всего поиска (секунд)

Дополнительно:
  --version, -v       Показать версию IconScout

Пример:
  icon_scout lookup github.com --json icons.json --pretty
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from icon_scout import __version__
from icon_scout.config import load_config
from icon_scout.engine import start_lookup
from icon_scout.errors import IconScoutError
from icon_scout.logger import DEFAULT_FORMAT, LOG_LEVELS, configure as configure_logging
from icon_scout.report.html_report import render_html
from icon_scout.report.json_report import render_json
from icon_scout.server import run as run_server

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='IconScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд IconScout CLI."""
    configure_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('lookup', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-результат в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-превью в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном (по умолчанию встроенный)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--lookup-timeout', 'lookup_timeout',
    type=float,
    default=None,
    help='Таймаут всего поиска (секунд)'
)
@click.pass_context
def lookup(ctx, url, json_output, html_output, template_dir, pretty, lookup_timeout):
    """Найти иконку сайта URL и сгенерировать результат."""
    cfg = ctx.obj['config']
    try:
        result = asyncio.run(
            asyncio.wait_for(start_lookup(cfg, url), timeout=lookup_timeout)
        )
    except asyncio.TimeoutError:
        print_error(f'Поиск не завершён за {lookup_timeout} секунд')
    except IconScoutError as e:
        print_error(f'Ошибка при поиске иконки: {e}')

    # Если не сохраняем в файл, печатаем в stdout
    if not json_output and not html_output:
        indent = 2 if pretty else None
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=indent))
        return

    if json_output:
        try:
            saved_json = render_json(result, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(result, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


@cli.command('serve', context_settings=CONTEXT_SETTINGS)
@click.option('--host', default=None, help='Адрес (по умолчанию из конфига)')
@click.option('--port', type=int, default=None, help='Порт (по умолчанию из конфига)')
@click.pass_context
def serve(ctx, host, port):
    """Запустить HTTP API (POST /api/favicon, GET /api?url=...)."""
    cfg = ctx.obj['config']
    click.echo(f'Serving on http://{host or cfg.host}:{port or cfg.port}')
    run_server(cfg, host=host, port=port)


if __name__ == "__main__":
    cli()
