"""Show a few chained-builder renditions side by side."""

import matplotlib.pyplot as plt

from chainkit import image_with_size


badges = {
    "square": image_with_size((100, 100)).fill_color("red").build(),
    "rounded": image_with_size((100, 100)).fill_color("red").corner_radius(20).build(),
    "circle": image_with_size((100, 100)).fill_color("red").corner_radius(50).build(),
    "outlined": (
        image_with_size((100, 100))
        .fill_color("white")
        .corner_radius(20)
        .border_width(4)
        .border_color("#1e90ff")
        .build()
    ),
    "faded": image_with_size((100, 100)).fill_color("red").corner_radius(20).opacity(0.4).build(),
}

fig, axes = plt.subplots(1, len(badges), figsize=(2.2 * len(badges), 2.4))
for ax, (title, image) in zip(axes, badges.items()):
    ax.imshow(image.pixels)
    ax.set_title(title)
    ax.set_axis_off()
plt.tight_layout()
plt.show()
