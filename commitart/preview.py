"""
Show a plan before anything is committed.

The terminal view mirrors the word matrix with box-drawing borders; the PNG
view draws the plan's weeks the way the contribution graph will show them.
"""

import sys
from datetime import timedelta

from PIL import Image, ImageDraw

from . import gitops
from .intensity import LEVELS, intensity_color, intensity_name

RESET = "\x1b[0m"
SAMPLE_COMMANDS = 5

# GitHub dark theme
BACKGROUND = "#0d1117"
PALETTE = ["#161b22", "#0e4429", "#006d32", "#26a641", "#39d353"]


def supports_color(stream=None) -> bool:
    stream = stream or sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()


def matrix_lines(matrix, word, intensity=None, color=False):
    """Box-drawn rendering of `matrix`, one string per output line."""
    paint = intensity_color(intensity) if color else ""
    reset = RESET if color else ""
    width = len(matrix[0]) if matrix else 0
    rule = "─" * (width * 2 + 2)
    lines = [f'Visual preview for "{word}" with {intensity_name(intensity)}:', rule]
    for row in matrix:
        cells = "".join(f"{paint}██{reset}" if cell else "  " for cell in row)
        lines.append(f"│{cells}│")
    lines.append(rule)
    lines.append(f"Dimensions: {len(matrix)} rows × {width} columns")
    return lines


def legend_lines(color=False):
    lines = ["Intensity Legend:"]
    for level in LEVELS:
        swatch = f"{intensity_color(level)}██{RESET}" if color else "██"
        lines.append(f"{swatch} {level}: {intensity_name(level)}")
    return lines


def command_preview(descriptor) -> str:
    stamp = descriptor.when.strftime(gitops.GIT_DATE_FORMAT)
    return f'git commit --allow-empty --date="{stamp}" -m "{descriptor.label}"'


def print_plan(plan, out=None, color=None):
    out = out or sys.stdout
    if color is None:
        color = supports_color(out)

    def emit(line=""):
        out.write(line + "\n")

    if plan.autocorrected:
        emit(f"Date auto-corrected: {plan.requested_start:%a %b %d %Y} -> "
             f"{plan.start:%a %b %d %Y} (previous Sunday)")
    emit()
    for line in matrix_lines(plan.matrix, plan.word, plan.intensity, color):
        emit(line)
    emit()
    for line in legend_lines(color):
        emit(line)
    emit()
    emit("Commit Details:")
    emit(f"Intensity level: {plan.intensity} ({intensity_name(plan.intensity)})")
    emit(f"Date range: {plan.start.isoformat()} to {plan.end.isoformat()} ({plan.weeks} weeks)")
    emit(f"Total commits: {plan.total}")
    emit(f"Sample commands (showing first {SAMPLE_COMMANDS}):")
    for descriptor in plan.descriptors[:SAMPLE_COMMANDS]:
        emit(command_preview(descriptor))
    if plan.total > SAMPLE_COMMANDS:
        emit(f"... and {plan.total - SAMPLE_COMMANDS} more commits")


def count_to_tier(count: int) -> int:
    if count <= 0:
        return 0
    if count < 3:
        return 1
    if count < 7:
        return 2
    if count < 12:
        return 3
    return 4


def render_heatmap(plan, path=None, cell=11, gap=3):
    """
    Draw the plan as a 7 x weeks heatmap and optionally save it to `path`.

    Returns the Pillow image.
    """
    weeks = plan.weeks
    pitch = cell + gap
    size = (gap + weeks * pitch, gap + 7 * pitch)
    img = Image.new("RGB", size, BACKGROUND)
    drw = ImageDraw.Draw(img)

    counts = plan.counts_by_day()
    for x in range(weeks):
        for y in range(7):
            day = plan.start + timedelta(days=x * 7 + y)
            tier = count_to_tier(counts.get(day, 0))
            left = gap + x * pitch
            top = gap + y * pitch
            drw.rectangle([left, top, left + cell - 1, top + cell - 1], fill=PALETTE[tier])

    if path is not None:
        img.save(path)
    return img
