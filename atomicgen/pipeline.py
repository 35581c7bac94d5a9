"""
Generation pipeline.

Reads every configured template, expands each one with the generator
matching its target kind, and passes the result through the
regeneration gate. All templates are read before anything is generated,
so an unreadable template aborts the run with nothing written.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .codegen.catalog import DEFAULT_CATALOG, TypeCatalog
from .codegen.generators import BaseGenerator, SourceGenerator, SuiteGenerator
from .codegen.rewriter import WrapperSyntax
from .codegen.templates import FragmentMap, PlaceholderRenderer, create_placeholder_renderer, parse_template
from .utils.config import GeneratorConfig, TargetConfig, get_config
from .utils.exceptions import ConfigurationError
from .utils.logging import GeneratorLogger
from .writer import is_up_to_date, read_template, write_if_changed

_log = GeneratorLogger(__name__)


@dataclass(frozen=True)
class TargetResult:
    """Outcome of one target."""
    name: str
    destination: Path
    content: str
    written: bool
    up_to_date: bool


def create_generator(
    target: TargetConfig,
    fragments: FragmentMap,
    config: GeneratorConfig,
    catalog: TypeCatalog = DEFAULT_CATALOG,
    renderer: Optional[PlaceholderRenderer] = None,
) -> BaseGenerator:
    """Create the generator for a target's kind."""
    wrapper = WrapperSyntax(name=config.wrapper.name, suffix=config.wrapper.suffix)

    if target.kind == "source":
        return SourceGenerator(
            fragments,
            catalog=catalog,
            renderer=renderer,
            wrapper=wrapper,
            normalize=target.normalize_deprecated,
        )
    if target.kind == "tests":
        return SuiteGenerator(
            fragments,
            catalog=catalog,
            renderer=renderer,
            wrapper=wrapper,
            normalize=target.normalize_deprecated,
            suite=config.suite,
        )
    raise ConfigurationError(f"Unknown target kind '{target.kind}' for target '{target.name}'")


def generate_text(
    target: TargetConfig,
    template_text: str,
    config: Optional[GeneratorConfig] = None,
    catalog: TypeCatalog = DEFAULT_CATALOG,
    renderer: Optional[PlaceholderRenderer] = None,
) -> str:
    """Expand already-read template text for ``target``."""
    config = config or get_config()
    fragments = parse_template(template_text)
    return create_generator(target, fragments, config, catalog, renderer).generate()


def select_targets(config: GeneratorConfig, names: Optional[Sequence[str]] = None) -> List[TargetConfig]:
    if not names:
        return list(config.targets)
    return [config.get_target(name) for name in names]


def run(
    config: Optional[GeneratorConfig] = None,
    root: Union[str, Path] = ".",
    targets: Optional[Sequence[str]] = None,
    check: bool = False,
    catalog: TypeCatalog = DEFAULT_CATALOG,
) -> List[TargetResult]:
    """
    Generate the selected targets.

    Args:
        config: Generator configuration, the global one if None
        root: Directory destinations are resolved against
        targets: Target names to run, all configured targets if None
        check: Compare only; never write

    Returns:
        One TargetResult per target, in configuration order
    """
    config = config or get_config()
    root = Path(root)
    selected = select_targets(config, targets)

    templates: Dict[str, str] = {}
    for target in selected:
        templates[target.name] = read_template(target.template)

    renderer = create_placeholder_renderer()
    results = []
    for target in selected:
        _log.log_generation_start(target.name, target.template)
        content = generate_text(target, templates[target.name], config, catalog, renderer)

        destination = Path(target.destination)
        if not destination.is_absolute():
            destination = root / destination

        if check:
            current = is_up_to_date(destination, content)
            if not current:
                _log.log_stale(str(destination))
            results.append(TargetResult(target.name, destination, content, written=False, up_to_date=current))
        else:
            written = write_if_changed(destination, content)
            results.append(TargetResult(target.name, destination, content, written=written, up_to_date=True))

    return results
