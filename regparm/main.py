import sys, typing
from enum import Enum

from rich.table  import Table
from rich.markup import escape

from . import args
from .common   import RegParmException, file_dump_yaml
from .context  import ExtParameters
from .loader   import load_parameters
from .params   import REGISTRY, Category
from .printer  import cons
from .state    import RegParmConfig


def __format_value(value) -> str:
    if value is None:
        return "[dim]unset[/dim]"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return escape("[" + ", ".join(str(v) for v in value) + "]")
    if isinstance(value, Enum):
        return str(value.value)
    return escape(str(value))


def print_parameters(ctx: ExtParameters) -> None:
    table = Table(title="Control Parameters", show_lines=False)
    table.add_column("Section",   style="cyan")
    table.add_column("Parameter", style="bold")
    table.add_column("Value",     style="magenta")

    for category in REGISTRY.get_all_categories():
        for name in REGISTRY.get_params_by_category(category):
            table.add_row(category.value, name, __format_value(ctx.get(name)))

    for name, value in [
        ("root_decoder_interface",      ctx.root_decoder_interface),
        ("secondary_decoder_interface", ctx.secondary_decoder_interface),
        ("block_select_mode",           ctx.block_select_mode),
        ("child_info_mode",             ctx.child_info_mode),
    ]:
        table.add_row(Category.SYSTEMVERILOG_OUT.value, name, __format_value(value))

    cons.print(table)

    if ctx.annotations:
        cons.print(f"[bold]Annotations[/bold] ({len(ctx.annotations)}):")
        cons.indent()
        for cmd in ctx.annotations:
            cons.print(escape(str(cmd)), highlight=False)
        cons.unindent()


def main(argv: typing.Optional[typing.List[str]] = None) -> int:
    arguments = args.parse(argv)
    config    = RegParmConfig.from_dict(vars(arguments))
    ctx       = ExtParameters(config=config)

    try:
        load_parameters(ctx, arguments.parm_files)

        if not config.quiet:
            print_parameters(ctx)

        if arguments.dump is not None:
            file_dump_yaml(arguments.dump, ctx.to_dict())

    except RegParmException as exc:
        cons.reset()
        cons.print_err(f"[bold red]Error[/bold red]: {escape(str(exc))}")
        return exc.exit_code
    except KeyboardInterrupt:
        return 130

    return 1 if ctx.diagnostics.has_errors else 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
