# examples/showcase.py

import asyncio

from adcolors import (
    Display, Logger, ascii_art, blend, box, color, gradient, line, nearest_named_color,
    progress_bar, rainbow, table, title,
)

async def main():
    display = Display()
    logger = Logger("adcolors.showcase", logging_enabled=True)
    width = display.terminal.width

    display.print(gradient(ascii_art("adcolors"), "#FF6347", "#4169E1"))
    display.print(title("Terminal styling", "chainable styles, color math, layout", width))
    display.print(line(width, color.bold("Styles")))
    display.print(color.bold.underline("bold underline") + " " + color.hex("#1E90FF").italic("hex italic"))
    display.print(color.bg256(236).gold(" gold on gray ") + " " + rainbow("rainbow text"))
    display.print(blend("blended", "red", "blue") + " " + blend("screened", "red", "blue", mode="screen"))
    display.print(f"nearest to #FA8000: {nearest_named_color('#FA8000')}")

    display.print(line(width, color.bold("Layout")))
    display.print(box(f"{color.green('boxed')} text\nover two lines", border_color="teal", style="double"))
    display.print(table([["Color", "Hex"], [color.coral("coral"), "#FF7F50"], [color.navy("navy"), "#000080"]],
                        align=["left", "right"]))
    display.print(progress_bar(7, 10, width=30))

    async with display.animations.create_spinner("Working"):
        await asyncio.sleep(1.5)
    await display.animations.animate(color.yellow("Blinking"), duration=1.5, interval=0.25)
    logger.success("Showcase finished")

if __name__ == "__main__":
    asyncio.run(main())
