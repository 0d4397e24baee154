"""Click option that cannot be combined with its conflicting options."""
import click


def _flag_for(ctx: click.Context, name: str) -> str:
    """Return the first command-line flag of the parameter called name."""
    for param in ctx.command.params:
        if param.name == name and param.opts:
            return param.opts[0]
    return f"--{name.replace('_', '-')}"


class MutuallyExclusiveOption(click.Option):
    """Click option that refuses to be combined with the listed options.

    The conflicting options are named in the help text and in the usage
    error, using the flags they were declared with.
    """

    def __init__(self, *args, **kwargs):
        """Initialize with exclusive_with, the parameter names this option excludes."""
        self.exclusive_with = tuple(kwargs.pop("exclusive_with", ()))
        super().__init__(*args, **kwargs)
        if self.exclusive_with:
            others = ", ".join(
                f"--{name.replace('_', '-')}" for name in self.exclusive_with
            )
            note = f"(not with {others})"
            self.help = f"{self.help} {note}" if self.help else note

    def handle_parse_result(self, ctx, opts, args):
        """Raise UsageError when a conflicting option was also given."""
        if self.name in opts:
            conflicts = [name for name in self.exclusive_with if name in opts]
            if conflicts:
                flags = " and ".join(
                    [self.opts[0], *(_flag_for(ctx, name) for name in conflicts)]
                )
                raise click.UsageError(
                    f"Options {flags} are mutually exclusive", ctx=ctx
                )
        return super().handle_parse_result(ctx, opts, args)
