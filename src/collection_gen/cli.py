#!/usr/bin/env python3
"""CLI entry point for the servers.com collection generator."""

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_CONFIG_PATH, load_collections, load_config
from .exceptions import CollectionGenError
from .generator import CollectionGenerator
from .models import CollectionTarget
from .rendering import DEFAULT_TEMPLATE, create_jinja_environment, format_code


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Generate Go collection wrappers for the servers.com API.")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Collection table to generate from (default: bundled config.yaml)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for generated files (default: general.output_dir from the config)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print derived metadata for each collection without writing files",
    )
    parser.add_argument(
        "--only",
        action="append",
        metavar="NAME",
        help="Generate only the named collection (repeatable)",
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Skip running gofmt on generated files",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue with remaining collections after a failure",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Check that args match the path placeholders before rendering",
    )
    return parser.parse_args(argv)


def select_targets(targets: list[CollectionTarget], only: list[str] | None) -> list[CollectionTarget]:
    """Filter targets down to the names in ``only``, keeping table order."""
    if not only:
        return targets

    known = {target.descriptor.name for target in targets}
    unknown = [name for name in only if name not in known]
    if unknown:
        raise CollectionGenError(f"Unknown collection(s): {', '.join(unknown)}")
    return [target for target in targets if target.descriptor.name in only]


def print_dry_run(generators: list[tuple[CollectionTarget, CollectionGenerator]], output_dir: Path) -> None:
    """Print the derived metadata of every collection."""
    print("\nCollections:")
    for target, generator in generators:
        info = generator.describe()
        print(f"\n  {info['collection_type_name_plural']}Collection:")
        print(f"    output: {output_dir / target.output}")
        print(f"    element: {info['collection_element_type']}")
        print(f"    path: {info['resource_path']}")
        print(f"    var_prefix: {info['collection_var_prefix'] or info['collection_element_uncapitalized']}")
        print(f"    args: {info['collection_args_prepared']}")
        print(f"    params: {[p['param_name'] for p in info['collection_params']]}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the generator."""
    args = parse_args(argv)

    try:
        print(f"Loading collections from {args.config}...")
        config = load_config(args.config)
        targets = select_targets(load_collections(config), args.only)
    except CollectionGenError as e:
        print(f"Error: {e}")
        return 1

    general = config.get("general") or {}
    output_dir = args.output_dir or Path(general.get("output_dir", "."))
    run_format = general.get("format", True) and not args.no_format

    env = create_jinja_environment()
    template_name = general.get("template", DEFAULT_TEMPLATE)
    generators = [(target, CollectionGenerator(target.descriptor, env, template_name)) for target in targets]

    if args.dry_run:
        print_dry_run(generators, output_dir)
        return 0

    failures = 0
    for target, generator in generators:
        print(f"Generating {target.output}...")
        try:
            if args.strict:
                generator.check_args_match_path()
            output_path = generator.render_to_file(output_dir / target.output)
        except (CollectionGenError, OSError) as e:
            print(f"  -> Error generating {target.output}: {e}")
            failures += 1
            if not args.keep_going:
                return 1
            continue

        if run_format:
            warning = format_code(output_path)
            if warning:
                print(f"Warning: {warning}")
        print(f"  -> Generated {output_path}")

    if failures:
        print(f"\nGeneration finished with {failures} error(s).")
        return 1

    print("\nGeneration complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
