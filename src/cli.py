import configparser
import logging
import os
import sys
from typing import Callable, Iterable, Optional

import click

from urikit.result import Result
import urikit.scanner as scanner
import urikit.uri as uri

logger: logging.Logger = logging.getLogger(__name__)

package_logger: logging.Logger = logging.getLogger('urikit')

# Configuration.

def read_config(config_file: Optional[str]) -> dict:
    """
    Read the configuration file.
    Missing files and missing entries fall back to defaults.
    """
    config_parser = configparser.RawConfigParser()
    if config_file:
        config_parser.read(config_file)
    return {
        'log_level': config_parser.get('logging', 'level', fallback = 'WARNING').upper(),
        'urls': config_parser.getboolean('scan', 'urls', fallback = True),
        'emails': config_parser.getboolean('scan', 'emails', fallback = True),
    }

def configure_logging(level_name: str, verbose: int) -> None:
    logging.basicConfig()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise click.BadParameter(f'unknown log level: {level_name}', param_hint = '[logging] level')
    level = min(level, {
        0: logging.WARNING,
        1: logging.INFO,
    }.get(verbose, logging.DEBUG))
    package_logger.setLevel(level)

# Input handling.

def input_lines(texts: tuple[str, ...]) -> Iterable[bytes]:
    """The given arguments, or else the lines of standard input without line terminators."""
    if texts:
        for text in texts:
            yield os.fsencode(text)
    else:
        for line in click.get_binary_stream('stdin'):
            yield line.rstrip(b'\r\n')

def run_coding(operation: Callable[[bytes], Result], texts: tuple[str, ...]) -> bool:
    """
    Apply an encode or decode operation to each input and print the outputs.
    Returns false if any input failed; the errors are logged.
    """
    success = True
    for (n, text) in enumerate(input_lines(texts), start = 1):
        with operation(text) as result:
            if result.ok:
                click.echo(result.buffer)
            else:
                logger.error(f'Input {n}: {result.message}')
                success = False
    return success

# Command-line interface.

@click.group()
@click.option('--config-file',
    type = click.Path(dir_okay = False),
    default = os.path.expanduser('~/.urikit'),
    help = 'Path to configuration file (optional).')
@click.option('-v', '--verbose', count = True,
    help = 'Print informational (specify once) or debug (specify twice) messages on stderr.')
@click.pass_context
def cli(ctx: click.Context, config_file: str, verbose: int) -> None:
    """Percent coding for URIs and detection of URLs and e-mail addresses."""
    config = read_config(config_file)
    configure_logging(config['log_level'], verbose)
    logger.debug(f'Configuration: {config}')
    ctx.default_map = {
        'scan': {'urls': config['urls'], 'emails': config['emails']},
    }

@cli.command()
@click.option('--component', is_flag = True, help = 'Escape reserved characters and # as well.')
@click.argument('texts', nargs = -1)
def encode(component: bool, texts: tuple[str, ...]) -> None:
    """Percent-encode each TEXT (or each line of standard input)."""
    run_coding(uri.encode_component if component else uri.encode, texts)

@cli.command()
@click.option('--component', is_flag = True, help = 'Resolve escaped reserved characters and # as well.')
@click.argument('texts', nargs = -1)
def decode(component: bool, texts: tuple[str, ...]) -> None:
    """Percent-decode each TEXT (or each line of standard input)."""
    if not run_coding(uri.decode_component if component else uri.decode, texts):
        sys.exit(1)

@cli.command()
@click.option('--urls/--no-urls', default = True, help = 'Report URLs (default from configuration).')
@click.option('--emails/--no-emails', default = True, help = 'Report e-mail addresses (default from configuration).')
@click.argument('file', type = click.File('rb'), default = '-')
def scan(urls: bool, emails: bool, file) -> None:
    """Print the URLs and e-mail addresses found in FILE (default: standard input)."""
    kinds = []
    if urls:
        kinds.append(scanner.MatchKind.URL)
    if emails:
        kinds.append(scanner.MatchKind.EMAIL)
    logger.info(f'Scanning for {", ".join(kind.value for kind in kinds) or "nothing"}.')

    for line in file:
        for match in scanner.iter_matches(line, kinds):
            click.echo(match.kind.value.encode() + b'\t' + match.slice(line))
