"""User management commands: create, delete, info."""

from ...lib.core.registry import CommandId, CommandRegistry
from . import Handler, Options


def _has_exactly(options: Options, *names: str) -> bool:
    """Return True if *options* holds all of *names* and nothing else."""
    return set(options) == set(names)


def cmd_user_create(options: Options) -> bool:
    if not _has_exactly(options, "uid", "display-name", "email"):
        return False
    print(
        f"user created with uid {options['uid']} "
        f"display-name {options['display-name']} and email {options['email']}"
    )
    return True


def cmd_user_delete(options: Options) -> bool:
    if not _has_exactly(options, "uid"):
        return False
    print(f"user with uid {options['uid']} was deleted")
    return True


def cmd_user_info(options: Options) -> bool:
    if not _has_exactly(options, "uid"):
        return False
    print(f"info about user with uid {options['uid']}")
    return True


def register(registry: CommandRegistry) -> dict[CommandId, Handler]:
    """Register user management commands."""
    return {
        registry.register("user create", "create a new user"): cmd_user_create,
        registry.register("user delete", "delete a user"): cmd_user_delete,
        registry.register("user info", "get user info"): cmd_user_info,
    }
