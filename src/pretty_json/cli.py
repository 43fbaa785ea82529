"""Command-line interface for the Pretty JSON formatter."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import FormatterConfig
from .error_handler import ErrorHandler
from .io import FileReader, FileWriter
from .types import PrettyJsonError, Style


class PrettyJsonUsageError(click.UsageError):
    exit_code = 1


class PrettyJsonCommand(click.Command):
    """Command that reports usage errors with exit code 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _configure_logging(config: FormatterConfig) -> None:
    logging.basicConfig(
        level=config.log_level_number,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command(cls=PrettyJsonCommand)
@click.option('-compact', '--compact', 'compact', is_flag=True,
              help='Open arrays and objects on the same line as their first member')
@click.argument('input_file', required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.argument('output_file', required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def main(ctx: click.Context, compact: bool, input_file: Optional[Path],
         output_file: Optional[Path]):
    """Pretty format JSON read from INPUT_FILE or standard input.

    The result is written to OUTPUT_FILE, or to standard output if no
    output file is given.
    """
    error_handler = ErrorHandler()

    try:
        config = FormatterConfig.from_env()
        _configure_logging(config)
        if compact:
            config.style = Style.COMPACT

        reader = FileReader()
        if input_file is not None:
            json_input = reader.read_file(input_file)
        else:
            stdin = sys.stdin
            if stdin.isatty():
                raise PrettyJsonUsageError("No JSON input: give an input file or pipe JSON to standard input", ctx=ctx)
            json_input = reader.read_stream(stdin)

        formatter = config.create_formatter()
        json_output = formatter.parse_and_format(json_input)

        writer = FileWriter()
        if output_file is not None:
            writer.write_file(output_file, json_output)
        else:
            writer.write_stream(sys.stdout, json_output)

    except PrettyJsonError as e:
        response = error_handler.handle_error(e)
        click.echo(response.message, err=True)
        ctx.exit(response.exit_code)


if __name__ == '__main__':
    main()
