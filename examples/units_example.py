#!/usr/bin/env python3

# Examples of units, scales and measures.

from pymensura.quantities import Latitude, Longitude
from pymensura.units import (CELSIUS_SCALE, DEGREE,
                             DEGREE_ARCMINUTE_ARCSECOND, FAHRENHEIT_SCALE,
                             HOUR, HOUR_MINUTE_SECOND, KELVIN, KILOGRAM,
                             KILOMETRE, Measure, METRE, NEWTON, SECOND, sqrt)


# ----------------------------------------------------------------------

def main():
    distance = Measure(42.195, KILOMETRE, error=0.042)
    time = Measure(2.0, HOUR) + Measure(1.0 * 60 + 9.0, SECOND)
    speed = (distance / time).convert(METRE / SECOND)
    print(f"Marathon: {distance} in {time} = {speed}")

    mass = Measure(75.0, KILOGRAM)
    accel = Measure(9.80665, METRE / SECOND ** 2)
    weight = (mass * accel).convert(NEWTON)
    print(f"Weight of {mass} = {weight:.1f}")
    print(f"Side of a 2 m² square = {sqrt(Measure(2.0, METRE ** 2)):.4f}")

    room = Measure(21.0, scale=CELSIUS_SCALE, error=0.5)
    print(f"Room temperature {room} = {room.convert(FAHRENHEIT_SCALE)}")
    print(f"Warmed by {Measure(3.0, KELVIN)} = "
          f"{room + Measure(3.0, KELVIN)}")

    lat, lon = Latitude(-33.8568, DEGREE), Longitude(-208.7847, DEGREE)
    print(f"Sydney Opera House is at "
          f"{lat.convert(DEGREE_ARCMINUTE_ARCSECOND)}, "
          f"{lon.convert(DEGREE_ARCMINUTE_ARCSECOND)}")
    print(f"Right ascension of 83.6331° = "
          f"{Measure(83.6331, DEGREE).convert(HOUR_MINUTE_SECOND)}")


# ----------------------------------------------------------------------

if __name__ == "__main__":
    main()
