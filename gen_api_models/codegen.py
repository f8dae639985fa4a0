"""Render templates and write generated output.

Takes the context from context_builder and produces, in the output
directory, one ``<Definition>.ts`` per model plus ``requestTypes.ts``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jinja2

from . import naming
from .models import GenerationContext
from .schema_parser import resolve_schema_type

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

REQUEST_TYPES_FILENAME = "requestTypes.ts"


def create_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["capitalize_first"] = naming.capitalize
    env.filters["property_key"] = naming.property_key
    env.filters["comment"] = naming.comment
    env.filters["union"] = naming.union
    return env


def render_definition(
    env: jinja2.Environment,
    definition_name: str,
    definition: dict[str, Any],
    strict_interfaces: bool,
) -> str:
    """Render the io-ts model of a single definition."""
    imports: set[str] = set()
    codec = resolve_schema_type(definition, imports, strict_interfaces)
    if definition_name in imports:
        imports.discard(definition_name)
        logger.warning(
            "Recursive model [%s] is not supported, the generated codec references itself",
            definition_name,
        )
    template = env.get_template("model.ts.j2")
    return template.render(
        definition_name=definition_name,
        definition=definition,
        codec=codec,
        imports=sorted(imports),
    )


def render_request_types(env: jinja2.Environment, context: GenerationContext) -> str:
    template = env.get_template("request_types.ts.j2")
    return template.render(
        operations=context.operations,
        imports=context.imports,
        generate_response_decoders=context.generate_response_decoders,
    )


def render_spec(env: jinja2.Environment, spec: dict[str, Any], source: str | None = None) -> str:
    template = env.get_template("spec.ts.j2")
    # YAML timestamps load as dates
    return template.render(spec_json=json.dumps(spec, indent=2, default=str), source=source)


def generate(
    context: GenerationContext,
    out_dir: Path,
    spec: dict[str, Any] | None = None,
    spec_output: Path | None = None,
    spec_source: str | None = None,
) -> list[Path]:
    """Write every generated file and return their paths."""
    env = create_environment()
    written: list[Path] = []

    if spec_output is not None and spec is not None:
        logger.info("Writing TS Specs to %s", spec_output)
        spec_output.parent.mkdir(parents=True, exist_ok=True)
        spec_output.write_text(render_spec(env, spec, spec_source))
        written.append(spec_output)

    out_dir.mkdir(parents=True, exist_ok=True)

    for definition_name, definition in context.definitions.items():
        output_path = out_dir / f"{definition_name}.ts"
        logger.info("%s -> %s", definition_name, output_path)
        output_path.write_text(
            render_definition(env, definition_name, definition, context.strict_interfaces)
        )
        written.append(output_path)

    if context.generate_operations:
        output_path = out_dir / REQUEST_TYPES_FILENAME
        logger.info("Generating request types -> %s", output_path)
        output_path.write_text(render_request_types(env, context))
        written.append(output_path)

    return written
