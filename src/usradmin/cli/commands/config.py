"""Configuration commands: show."""

import yaml

from ...lib.core.config import CONFIG_ERRORS, color_mode, global_config_stack, state_root
from ...lib.core.registry import CommandId, CommandRegistry
from ...lib.util.ansi import gray, supports_color, yes_no
from . import Handler, Options


def cmd_config_show(options: Options) -> bool:
    """Display config search paths, the state root and the resolved config."""
    if options:
        return False
    color_enabled = supports_color(color_mode())
    try:
        stack = global_config_stack()
    except CONFIG_ERRORS as e:
        raise SystemExit(f"Cannot read global config: {e}") from e

    print("Configuration (read, lowest priority first):")
    for scope in stack.scopes:
        exists = scope.source is not None and scope.source.is_file()
        print(
            f"- [{scope.level}] {gray(str(scope.source), color_enabled)} "
            f"(exists: {yes_no(exists, color_enabled)})"
        )
    print(f"State root: {gray(str(state_root()), color_enabled)}")

    resolved = stack.resolve()
    if resolved:
        print("Resolved config:")
        print(yaml.safe_dump(resolved, default_flow_style=False, sort_keys=True).rstrip())
    else:
        print("Resolved config: empty")
    return True


def register(registry: CommandRegistry) -> dict[CommandId, Handler]:
    """Register configuration commands."""
    return {
        registry.register("config show", "show configuration paths and values"): cmd_config_show,
    }
