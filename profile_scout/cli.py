# === FILE: profile_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера ProfileScout через командную строку.

Команды:
  crawl     Обойти стартовые страницы и сохранить уникальные ссылки на профили
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда crawl опции:
  --seeds PATH          Файл со стартовыми URL (override seeds_file)
  --output PATH         Файл для результатов (override output_file)
  --json PATH           Сохранить JSON-сводку обхода
  --max-concurrency N   Макс. число одновременных запросов
  --delay-ms N          Пауза перед каждым запросом (мс)
  --scan-timeout SEC    Таймаут всего обхода (секунд)

Дополнительно:
  --version, -v       Показать версию ProfileScout

Пример:
  profile_scout crawl --seeds resource/city_urls.csv --output user_profile_urls.txt
"""
import sys
import asyncio
import json
from pathlib import Path

import click

from profile_scout import __version__
from profile_scout.config import load_config
from profile_scout.logger import init_logging
from profile_scout.scanner import start_scan
from profile_scout.report.json_report import render_json
from profile_scout.report.text_report import write_results
from profile_scout.utils import read_url_list

CONTEXT_SETTINGS = dict(help_option_names=["--help"])

def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='ProfileScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
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
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд ProfileScout CLI."""
    init_logging(
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

@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--seeds', '-s', 'seeds_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Файл со стартовыми URL, по одному на строку'
)
@click.option(
    '--output', '-o', 'output_path',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Файл для уникальных ссылок на профили'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-сводку обхода в файл'
)
@click.option(
    '--max-concurrency', 'max_concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Макс. число одновременных запросов (override max_concurrent_requests)'
)
@click.option(
    '--delay-ms', 'delay_ms',
    type=click.IntRange(min=0),
    default=None,
    help='Пауза перед каждым запросом, мс (override request_delay_ms)'
)
@click.option(
    '--scan-timeout', 'scan_timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl(ctx, seeds_path, output_path, json_output, max_concurrency, delay_ms, scan_timeout):
    """Обойти стартовые страницы и сохранить уникальные ссылки на профили."""
    cfg = ctx.obj['config']
    overrides = {}
    if max_concurrency is not None:
        overrides['max_concurrent_requests'] = max_concurrency
    if delay_ms is not None:
        overrides['request_delay_ms'] = delay_ms
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    seeds_file = seeds_path or cfg.seeds_file
    if seeds_file is None:
        print_error('Не указан файл со стартовыми URL (--seeds или seeds_file в конфиге)')
    try:
        seeds = read_url_list(seeds_file)
    except Exception as e:
        print_error(f'Ошибка чтения стартовых URL: {e}')
    if not seeds:
        click.echo('No URLs loaded. Exiting.')
        return

    click.echo(
        f'Starting crawl: {len(seeds)} seed URLs, '
        f'max {cfg.max_concurrent_requests} concurrent requests, '
        f'{cfg.request_delay_ms}ms delay'
    )
    try:
        if scan_timeout is not None:
            summary = asyncio.run(
                asyncio.wait_for(start_scan(cfg, seeds), timeout=scan_timeout)
            )
        else:
            summary = asyncio.run(start_scan(cfg, seeds))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {scan_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    click.echo(f'Crawl finished. Total unique profile URLs collected: {len(summary.profile_urls)}.')

    try:
        saved = write_results(summary.profile_urls, output_path or cfg.output_file)
    except Exception as e:
        print_error(f'Ошибка при сохранении результатов: {e}')
    if saved is not None:
        click.echo(f'Profile URLs: {saved}')

    if json_output:
        try:
            saved_json = render_json(summary, json_output)
            click.echo(f'JSON summary: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(json.dumps(cfg.model_dump(mode='json'), indent=2, ensure_ascii=False))

if __name__ == "__main__":
    cli()
