"""
Terminal output helpers. Styling is applied only when `colors` is enabled.
"""
import click

colors = False

S_ATTENTION = {'fg': 'red', 'bold': True}
S_HEADER = {'fg': 'green'}
S_EMPH = {'fg': 'yellow'}


def style_message(message, style):
    if colors:
        return click.style(message, **style)
    return message


def s_header(message):
    return style_message(message, S_HEADER)


def s_attention(message):
    return style_message(message, S_ATTENTION)


def s_emph(message):
    return style_message(message, S_EMPH)


def prints(message):
    click.echo(message, color=colors)


def styled_line(header, content="", level=0, new_line=False,
                header_style=S_HEADER):
    """
    Returns `header content` with the header styled, indented by `level`
    tabs and optionally preceded by an empty line.
    """
    line = ("\t" * level) + style_message(str(header), header_style)
    if content:
        line += f" {content}"
    return ("\n" if new_line else "") + line


def h_print(header, content="", level=0, new_line=False):
    prints(styled_line(header, content, level, new_line, S_HEADER))


def a_print(header, content="", level=0, new_line=False):
    prints(styled_line(header, content, level, new_line, S_ATTENTION))
