import logging

import click

from hashid_codec import Hashid, HashidError
from hashid_common.logger import configure_logging
from hashid_config import CONFIG

LOG = logging.getLogger(__name__)


def _build_hashid(ctx) -> Hashid:
    params = ctx.obj
    overrides = {}
    if params['salt'] is not None:
        overrides['salt'] = params['salt']
    if params['alphabet'] is not None:
        overrides['alphabet'] = params['alphabet']
    if params['min_length'] is not None:
        overrides['min_length'] = params['min_length']
    try:
        return Hashid.from_config(CONFIG, **overrides)
    except HashidError as ex:
        raise click.UsageError(str(ex), ctx=ctx) from None


@click.group()
@click.option('--salt', help='salt, default from HASHID_SALT')
@click.option('--alphabet', help='alphabet, at least 16 unique characters')
@click.option('--min-length', type=click.IntRange(min=0), help='minimum hashid length')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
              default=None, help='default from HASHID_LOG_LEVEL')
@click.pass_context
def main(ctx, salt, alphabet, min_length, log_level):
    """Hashid Commands"""
    configure_logging(level=log_level or CONFIG.log_level)
    ctx.obj = dict(salt=salt, alphabet=alphabet, min_length=min_length)


@main.command()
@click.argument('numbers', nargs=-1, required=True, type=click.IntRange(min=0))
@click.pass_context
def encode(ctx, numbers):
    """Encode non-negative integers"""
    hashid = _build_hashid(ctx)
    click.echo(hashid.encode(numbers))


@main.command()
@click.argument('value')
@click.pass_context
def decode(ctx, value):
    """Decode a hashid, exit 1 if it does not match configuration"""
    hashid = _build_hashid(ctx)
    numbers = hashid.decode(value)
    if not numbers:
        LOG.info('can not decode %r', value)
        ctx.exit(1)
    click.echo(','.join(str(x) for x in numbers))


@main.command()
@click.argument('value')
@click.pass_context
def encode_hex(ctx, value):
    """Encode a hex string"""
    hashid = _build_hashid(ctx)
    result = hashid.encode_hex(value)
    if not result:
        raise click.BadParameter(f'invalid hex string {value!r}', param_hint='VALUE')
    click.echo(result)


@main.command()
@click.argument('value')
@click.pass_context
def decode_hex(ctx, value):
    """Decode a hashid made by encode-hex"""
    hashid = _build_hashid(ctx)
    result = hashid.decode_hex(value)
    if not result:
        LOG.info('can not decode %r', value)
        ctx.exit(1)
    click.echo(result)


@main.command()
@click.pass_context
def inspect(ctx):
    """Show the alphabet partition, salt is never shown"""
    hashid = _build_hashid(ctx)
    partition = hashid.partition
    click.echo(f'min_length: {hashid.min_length}')
    click.echo(f'alphabet:   {len(partition.alphabet)} characters')
    click.echo(f'separators: {"".join(sorted(partition.separators))}')
    click.echo(f'guards:     {"".join(sorted(partition.guards))}')


if __name__ == "__main__":
    main()
