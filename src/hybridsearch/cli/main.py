"""Main CLI entry point for hybridsearch."""

import sys

import click

from hybridsearch import __version__
from hybridsearch.errors import (
    EXIT_ERROR,
    EXIT_INVALID_ARGS,
    EXIT_SUCCESS,
    HybridSearchError,
    InvalidRequest,
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """hybridsearch: Keyword, semantic and hybrid search against Vespa"""
    pass


def search_options(func):
    """Options shared by all search modes."""
    options = [
        click.option('--limit', type=int, default=None, help='Number of results (default: from config, 10)'),
        click.option('--timeout', type=float, default=None, help='Request timeout in seconds'),
        click.option('--config', 'config_path', type=click.Path(), help='Config file path'),
        click.option('--explain', is_flag=True, help='Print the request body instead of sending it'),
        click.option('--json', 'output_json', is_flag=True, help='Output JSON format'),
        click.option('--verbose', '-v', is_flag=True, help='Verbose output'),
        click.option('--debug', is_flag=True, help='Debug mode (show HTTP and query details)'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


# Search commands
@cli.group()
def search():
    """Search the index"""
    pass


@search.command('keyword')
@click.argument('query')
@search_options
def search_keyword(query, limit, timeout, config_path, explain, output_json, verbose, debug):
    """Lexical search over all indexed text fields"""
    from hybridsearch.cli.search import search_command
    search_command('keyword', query, limit, None, timeout, config_path, explain, output_json, verbose, debug)


@search.command('semantic')
@click.argument('query')
@search_options
def search_semantic(query, limit, timeout, config_path, explain, output_json, verbose, debug):
    """Nearest-neighbor search on the query's embedding"""
    from hybridsearch.cli.search import search_command
    search_command('semantic', query, limit, None, timeout, config_path, explain, output_json, verbose, debug)


@search.command('hybrid')
@click.argument('query')
@click.option('--target-hits-multiplier', type=int, default=None,
              help='Nearest-neighbor candidates per requested hit (default: 1)')
@search_options
def search_hybrid(query, target_hits_multiplier, limit, timeout, config_path, explain, output_json, verbose, debug):
    """Lexical and nearest-neighbor search combined by the hybrid ranking profile"""
    from hybridsearch.cli.search import search_command
    search_command('hybrid', query, limit, target_hits_multiplier, timeout, config_path, explain, output_json, verbose, debug)


@cli.command('index')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--timeout', type=float, default=None, help='Request timeout in seconds')
@click.option('--config', 'config_path', type=click.Path(), help='Config file path')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def index(file, timeout, config_path, output_json, verbose):
    """Index documents from a JSON file.

    The file holds a JSON array of objects with 'id', 'title', 'content'
    and 'category'. Embeddings are synthesized from title and content.

    Examples:
      hsearch index docs.json
      VESPA_ENDPOINT=http://vespa:8080 hsearch index docs.json --json
    """
    from hybridsearch.cli.index import index_command
    index_command(file, timeout, config_path, output_json, verbose)


@cli.command('embed')
@click.argument('text')
@click.option('--show', type=int, default=8, help='Leading components to print (0 = all in JSON mode)')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
def embed(text, show, output_json):
    """Show the placeholder embedding for TEXT"""
    from hybridsearch.cli.embed import embed_command
    embed_command(text, show, output_json)


@cli.command('doctor')
@click.option('--config', 'config_path', type=click.Path(), help='Config file path')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
def doctor(config_path, output_json):
    """Check that the Vespa endpoint is up"""
    from hybridsearch.cli.config import doctor as run_doctor
    if not run_doctor(config_path, output_json):
        sys.exit(EXIT_ERROR)


from hybridsearch.cli.config import config_group
cli.add_command(config_group, name='config')


def main():
    """Main CLI entry point with structured error handling."""
    try:
        cli(standalone_mode=False)
        return EXIT_SUCCESS
    except click.exceptions.Exit as e:
        return e.exit_code
    except click.ClickException as e:
        # Click handles its own exceptions (usage errors, etc.)
        e.show()
        return EXIT_INVALID_ARGS
    except click.exceptions.Abort:
        print("\n[INFO] Operation cancelled by user", file=sys.stderr)
        return EXIT_ERROR
    except InvalidRequest as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_INVALID_ARGS
    except HybridSearchError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        print("\n[INFO] Operation cancelled by user", file=sys.stderr)
        return EXIT_ERROR
    except Exception as e:
        print(f"[ERROR] Unexpected error: {e}", file=sys.stderr)
        if '--verbose' in sys.argv or '-v' in sys.argv or '--debug' in sys.argv:
            import traceback
            traceback.print_exc()
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
