from rollingcubes.frontend.render import render_plain, render_table

__all__ = ["render_plain", "render_table"]
