"""Render a batch of image recipes from a JSON input file.

Usage examples:
  python examples/run_render.py --write-template examples/configs/render_template.json
  python examples/run_render.py --input examples/configs/render_template.json
"""

from chainkit.workflows.render import main


if __name__ == "__main__":
    main()
