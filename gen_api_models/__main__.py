"""Entry point: python -m gen_api_models

Reads a Swagger 2.0 spec, writes io-ts models and request types.
"""

from __future__ import annotations

from pathlib import Path

import click
from click.core import ParameterSource

from .codegen import generate
from .config import Settings
from .context_builder import build_context
from .errors import GeneratorError
from .loader import load_spec
from .logging import configure_logging


@click.command()
@click.argument("spec_path")
@click.option("-o", "--out-dir", required=True, type=click.Path(file_okay=False, path_type=Path), help="Directory for the generated model files.")
@click.option("--spec-output", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Also write the bundled spec as a TypeScript module.")
@click.option("--strict/--no-strict", "strict_interfaces", default=False, help="Generate exact (strict) interfaces.")
@click.option("--request-types/--no-request-types", "generate_request_types", default=False, help="Generate request types.")
@click.option("--response-decoders/--no-response-decoders", "generate_response_decoders", default=False, help="Generate response decoders.")
@click.option("--default-success-type", default="undefined", help="Type of 200 responses without a schema.")
@click.option("--default-error-type", default="Error", help="Type of non-200 responses without a schema.")
@click.option("--log-level", default="INFO", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False), help="Logging level.")
def main(spec_path: str, out_dir: Path, spec_output: Path | None, **options):
    """Generate TypeScript models and request types from SPEC_PATH (file or URL)."""
    ctx = click.get_current_context()
    # only options given on the command line override env settings
    overrides = {
        name: value
        for name, value in options.items()
        if ctx.get_parameter_source(name) is not ParameterSource.DEFAULT
    }
    settings = Settings(**overrides)
    configure_logging(settings.log_level)

    try:
        spec = load_spec(spec_path)
        context = build_context(spec, settings)
    except GeneratorError as exc:
        raise click.ClickException(str(exc)) from exc

    written = generate(context, out_dir, spec=spec, spec_output=spec_output, spec_source=spec_path)
    click.echo(f"Generated {len(written)} files in {out_dir} ({len(context.operations)} operations)")


if __name__ == "__main__":
    main()
