"""Command-line entry point: generate use cases for one website."""
from __future__ import annotations
import argparse
import logging
import sys

from usecase_generator.common.config import load_settings
from usecase_generator.common.logging_setup import setup_logging
from usecase_generator.common.templates import load_prompt_template
from usecase_generator.generation.client import UpstreamError
from usecase_generator.generation.pipeline import generate_use_cases

LOGGER = logging.getLogger("usecase.cli")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Generate AI use cases for a business website")
    ap.add_argument("--website", required=True, help="Business website to analyse")
    ap.add_argument("--config", default=None, help="YAML settings file")
    ap.add_argument("--raw", action="store_true", help="Print the raw model reply")
    args = ap.parse_args(argv)

    settings = load_settings(args.config)
    setup_logging(settings.log_level)

    template = load_prompt_template(settings.template_path)

    try:
        result = generate_use_cases(args.website, settings, template)
    except UpstreamError as e:
        LOGGER.error("Generation failed: %s", e)
        return 1

    m = result.metrics
    LOGGER.info(
        "Latency: %ss | in=%s out=%s total=%s",
        m.response_time_seconds,
        m.prompt_tokens,
        m.completion_tokens,
        m.total_tokens,
    )
    if args.raw:
        print(result.content)
        return 0
    for uc in result.use_cases:
        print(f"{uc.id}. {uc.title}")
        if uc.description:
            print(f"   {uc.description}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
