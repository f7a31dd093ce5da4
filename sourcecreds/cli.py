"""
Command-line interface for source credential validation.
"""

import click
from typing import Optional

from . import __version__
from .config import Settings, load_credentials_file
from .emitter import TemplateEmitter
from .errors import SourceCredentialError
from .loggingx import setup_logging
from .pipeline import register_credentials, validate_specs
from .registry import ValidatorRegistry
from .validators import validate_connection_arn


@click.group()
@click.version_option(version=__version__)
@click.option('--log-level', default=None, help='Logging level (default: SOURCECREDS_LOG_LEVEL or INFO)')
@click.option('--verbose', is_flag=True, default=False, help='Human readable log output')
def cli(log_level: Optional[str], verbose: bool):
    """Source Credentials - validate build service source credentials."""
    settings = Settings.from_env()
    if log_level:
        settings.log_level = log_level.upper()
    if verbose:
        settings.verbose = True
    
    setup_logging(settings.log_level, settings.verbose, settings.log_file)


@cli.command()
@click.argument('credentials_file', type=click.Path(exists=True, dir_okay=False))
def validate(credentials_file: str):
    """Validate every credential in a credentials file."""
    try:
        specs = load_credentials_file(credentials_file)
        validated = validate_specs(specs)
    except SourceCredentialError as e:
        click.echo(f"❌ Validation failed: {e}", err=True)
        raise click.Abort()
    
    for _, spec, record in validated:
        description = record.describe()
        line = f"✅ {spec.name}: {description['serverType']} {description['authType']}"
        if record.username is not None:
            line += f" username={description['username']}"
        line += f" token={description['token']}"
        click.echo(line)
    
    click.echo(f"{len(validated)} credential(s) valid")


@cli.command()
@click.argument('credentials_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--format', 'output_format', type=click.Choice(['yaml', 'json']), default='yaml',
              help='Template output format')
@click.option('-o', '--output', type=click.Path(dir_okay=False, writable=True), default=None,
              help='Write the template to a file instead of stdout')
def render(credentials_file: str, output_format: str, output: Optional[str]):
    """Validate credentials and render the source credential template."""
    try:
        specs = load_credentials_file(credentials_file)
        emitter = TemplateEmitter()
        register_credentials(specs, emitter)
        text = emitter.render(output_format)
    except SourceCredentialError as e:
        click.echo(f"❌ Render failed: {e}", err=True)
        raise click.Abort()
    
    if output:
        with open(output, 'w') as f:
            f.write(text)
        click.echo(f"📄 Template: {output}")
    else:
        click.echo(text, nl=False)


@cli.command()
@click.argument('connection_arn')
def check_arn(connection_arn: str):
    """Check a CodeConnections connection ARN."""
    try:
        validate_connection_arn(connection_arn)
    except SourceCredentialError as e:
        click.echo(f"❌ {e.message}", err=True)
        raise click.Abort()
    
    click.echo(f"✅ Valid connection ARN: {connection_arn}")


@cli.command()
def list_providers():
    """List all available credential providers."""
    registry = ValidatorRegistry()
    click.echo("Available providers:")
    for provider, info in registry.list_providers().items():
        fields = ", ".join(
            f"{name}*" if name in info['required_fields'] else name
            for name in info['fields']
        )
        click.echo(f"  {provider} ({info['server_type']}): {info['description']} [{fields}]")


if __name__ == '__main__':
    cli()
