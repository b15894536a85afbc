"""Basic Chromaramp usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaramp import (
    Gradient,
    HSV,
    LinRGB,
    Range,
    to_image,
)


def demonstrate_lookup() -> None:
    # Evenly spaced stops over [0, 1]; positions outside are clamped.
    sunset = Gradient.from_colors([
        LinRGB((1.0, 0.8, 0.2)),
        LinRGB((0.9, 0.3, 0.1)),
        LinRGB((0.2, 0.0, 0.4)),
    ])
    print("domain:", sunset.domain())
    print("at 0.25:", sunset.get(0.25))
    print("before start:", sunset.get(-3.0))


def demonstrate_sampling() -> None:
    ramp = Gradient.with_domain([
        (0.0, HSV((300.0, 1.0, 1.0))),
        (2.0, HSV((60.0, 1.0, 1.0))),
    ])
    samples = ramp.take(5)
    print("5 samples:", list(samples))
    print("backwards:", list(reversed(ramp.take(5))))

    # Slicing keeps a view on the same stops.
    first_half = ramp.slice(Range.up_to_inclusive(1.0))
    print("first half domain:", first_half.domain())
    print("first half, 3 samples:", list(first_half.take(3)))


def demonstrate_rendering() -> None:
    strip = Gradient.from_colors([LinRGB((0.0, 0.0, 0.0)), LinRGB((0.0, 0.6, 1.0))])
    image = to_image(strip, width=256, height=32)
    image.save("gradient_strip.png")
    print("saved gradient_strip.png", image.size)


if __name__ == "__main__":
    demonstrate_lookup()
    demonstrate_sampling()
    demonstrate_rendering()
