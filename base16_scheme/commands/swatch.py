"""Write a PNG swatch of the scheme's colors.

One square per color, in index order, laid out in rows of --columns
(default 8, so a base16 scheme is two rows: base00-07 then base08-0F).
Missing cells at the end of the last row are left transparent.

Example:
    base16-scheme swatch -s ocean.yaml ocean.png
    base16-scheme swatch -s ocean.yaml ocean.png --size 32 --columns 16
"""

import os
import sys

import numpy as np
from PIL import Image

from base16_scheme.core.types import Command, Report

command = Command(
    name='swatch',
    help='Write a PNG swatch with one square per scheme color.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('output', help='Path of the PNG to write')
    parser.add_argument('--size', type=int, default=64, help='Square size in pixels (default: 64)')
    parser.add_argument('--columns', type=int, default=8, help='Squares per row (default: 8)')


def build_swatch(rgb: np.ndarray, size: int = 64, columns: int = 8) -> Image.Image:
    """Lay out an (N, 3) uint8 array as an RGBA image of size x size squares."""
    if size < 1 or columns < 1:
        raise ValueError(f'size and columns must be positive, got size={size} columns={columns}')
    n = len(rgb)
    columns = max(1, min(columns, n)) if n else 1
    rows = max(1, -(-n // columns))

    cells = np.zeros((rows * columns, 4), dtype=np.uint8)
    cells[:n, :3] = rgb
    cells[:n, 3] = 255
    grid = cells.reshape(rows, columns, 4)
    pixels = np.repeat(np.repeat(grid, size, axis=0), size, axis=1)
    return Image.fromarray(pixels)


@command.run
def run(scheme, report: Report, args) -> int:
    try:
        image = build_swatch(scheme.rgb_array(), size=args.size, columns=args.columns)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    parent = os.path.dirname(args.output)
    if parent:
        os.makedirs(parent, exist_ok=True)
    image.save(args.output)
    report.add_file(args.output)
    for index, color in scheme.colors.items():
        report.add_color(index, {'hex': str(color)})
    return 0
