from unittest import TestCase


class TestAngle(TestCase):
    def test___init__(self):
        from pymensura.quantities import Angle
        from pymensura.units import (DEGREE, Measure, METRE, RADIAN,
                                     UnitValidationError)

        a = Angle(30.0, DEGREE, symbol='θ')
        self.assertEqual(a.symbol, 'θ')
        self.assertIsInstance(a, Measure)
        self.assertIs(Angle(1.0).unit, RADIAN)

        with self.assertRaises(UnitValidationError):
            Angle(1.0, METRE)

        # Arithmetic gives plain measures.
        b = a + Measure(15.0, DEGREE)
        self.assertIs(type(b), Measure)
        self.assertAlmostEqual(b.scalar_value, 45.0)

    def test___repr__(self):
        from pymensura.quantities import Angle
        from pymensura.units import DEGREE

        self.assertEqual(repr(Angle(30.0, DEGREE)),
                         "Angle(30.0, <UnitMultiple '°'>)")
        self.assertEqual(repr(Angle(30.0, DEGREE, symbol='θ')),
                         "Angle(30.0, <UnitMultiple '°'>, symbol='θ')")


class TestLatitude(TestCase):
    def test___init__(self):
        import math
        from pymensura.quantities import Latitude
        from pymensura.units import (DEGREE, QuantityError,
                                     QuantityValidationError)

        for deg in (-90.0, -45.0, 0.0, 90.0):
            self.assertEqual(Latitude(deg, DEGREE).scalar_value, deg)
        Latitude(math.pi / 2)  # Radians by default.

        for deg in (-90.5, 91.0, 180.0):
            with self.assertRaises(QuantityValidationError) as cm:
                Latitude(deg, DEGREE)
            self.assertEqual(cm.exception.reason, QuantityError.OUT_OF_RANGE)
        with self.assertRaises(QuantityValidationError):
            Latitude(2.0)

    def test_range(self):
        from pymensura.quantities import Latitude
        from pymensura.units import DEGREE, Measure

        lo, hi = Latitude(0.0, DEGREE).range
        self.assertEqual(lo, Measure(-90.0, DEGREE))
        self.assertEqual(hi, Measure(90.0, DEGREE))


class TestNormalisedAngle(TestCase):
    def test___init__(self):
        import math
        from pymensura.quantities import Longitude, NormalisedAngle
        from pymensura.units import DEGREE, METRE, UnitValidationError

        for value, expected in ((370.0, 10.0), (-90.0, 270.0),
                                (0.0, 0.0), (-720.0, 0.0), (720.0, 0.0),
                                (359.5, 359.5)):
            self.assertAlmostEqual(
                NormalisedAngle(value, DEGREE).scalar_value, expected)

        # Limits are inside the range.
        self.assertEqual(Longitude(360.0, DEGREE).scalar_value, 360.0)

        lon = Longitude(-math.pi / 2)
        self.assertAlmostEqual(lon.scalar_value, 1.5 * math.pi)
        self.assertEqual(str(Longitude(-90.0, DEGREE)), '270.0°')
        self.assertEqual(Longitude(-4.5 * math.pi), Longitude(1.5 * math.pi))

        # Wrapped values are always less than the maximum.
        tiny = NormalisedAngle(-1e-20, DEGREE)
        self.assertLess(tiny.scalar_value, 360.0)

        with self.assertRaises(UnitValidationError):
            Longitude(1.0, METRE)

    def test_range(self):
        from pymensura.quantities import Longitude
        from pymensura.units import DEGREE, Measure

        west_east = (Measure(-180.0, DEGREE), Measure(180.0, DEGREE))
        self.assertAlmostEqual(
            Longitude(270.0, DEGREE, range=west_east).scalar_value, -90.0)
        self.assertEqual(
            Longitude(-180.0, DEGREE, range=west_east).scalar_value, -180.0)
        self.assertEqual(Longitude(0.0, DEGREE, range=west_east).range,
                         west_east)
        self.assertEqual(Longitude(0.0, DEGREE).range,
                         (Measure(0.0, DEGREE), Measure(360.0, DEGREE)))

        with self.assertRaises(ValueError):
            Longitude(0.0, DEGREE, range=(Measure(10.0, DEGREE),
                                          Measure(10.0, DEGREE)))

    def test_derived_range(self):
        from pymensura.quantities import NormalisedAngle
        from pymensura.units import DEGREE, Measure

        class HourAngle(NormalisedAngle):
            minimum = Measure(-180.0, DEGREE)
            maximum = Measure(180.0, DEGREE)

        self.assertAlmostEqual(HourAngle(270.0, DEGREE).scalar_value, -90.0)
        self.assertAlmostEqual(HourAngle(180.0, DEGREE).scalar_value, 180.0)
        self.assertAlmostEqual(HourAngle(540.0, DEGREE).scalar_value, -180.0)
        self.assertEqual(HourAngle(0.0, DEGREE).range[1],
                         Measure(180.0, DEGREE))


class TestMagnitude(TestCase):
    def test___init__(self):
        from pymensura.quantities import Magnitude
        from pymensura.units import (CELSIUS_SCALE, KELVIN_SCALE,
                                     MAGNITUDE_SCALE, QuantityError,
                                     QuantityValidationError,
                                     UnitValidationError)

        m = Magnitude(4.83, error=0.01)
        self.assertIs(m.scale, MAGNITUDE_SCALE)
        self.assertEqual(str(m), '4.83 ± 0.01 mag')

        diff = Magnitude(6.0) - Magnitude(4.5)
        self.assertAlmostEqual(diff.scalar_value, 1.5)

        with self.assertRaises(QuantityValidationError) as cm:
            Magnitude(1.0, KELVIN_SCALE)
        self.assertEqual(cm.exception.reason,
                         QuantityError.ILLEGAL_SCALE_TYPE)
        with self.assertRaises(UnitValidationError):
            Magnitude(1.0, CELSIUS_SCALE)
