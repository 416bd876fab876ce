from unittest import TestCase, mock


class TestScales(TestCase):
    def test_nominal(self):
        from pymensura.units import (Measure, NominalScale, OrdinalScale,
                                     ScaleError, ScaleValidationError)

        colours = NominalScale(['red', 'green', 'blue'], 'colour')
        self.assertEqual(colours.labels, ('red', 'green', 'blue'))
        self.assertIn('green', colours)
        self.assertEqual(colours.index('blue'), 2)
        self.assertFalse(colours.is_measurement_scale)
        self.assertTrue(colours.dimensions.is_dimensionless())

        with self.assertRaises(ScaleValidationError) as cm:
            colours.index('mauve')
        self.assertEqual(cm.exception.reason, ScaleError.UNKNOWN_LABEL)

        with self.assertRaises(ValueError):
            NominalScale(['red', 'red'])

        # Equal when the same type with the same symbol and labels.
        same = NominalScale(['red', 'green', 'blue'], 'colour')
        self.assertEqual(colours, same)
        self.assertEqual(hash(colours), hash(same))
        self.assertNotEqual(colours, NominalScale(['red', 'green', 'blue']))
        self.assertNotEqual(colours,
                            OrdinalScale(['red', 'green', 'blue'], 'colour'))
        self.assertNotEqual(colours, NominalScale(['red', 'green'], 'colour'))

        # Unrelated scales sharing labels.
        grade = NominalScale(['a', 'b'], 'grade')
        band = NominalScale(['a', 'b'], 'band')
        self.assertNotEqual(grade, band)
        self.assertNotEqual(Measure('a', scale=grade),
                            Measure('a', scale=band))
        self.assertEqual(Measure('a', scale=grade),
                         Measure('a', scale=NominalScale(['a', 'b'], 'grade')))

    def test_ratio(self):
        from pymensura.units import KELVIN, KELVIN_SCALE, METRE, RatioScale

        self.assertEqual(KELVIN_SCALE.unit, KELVIN)
        self.assertEqual(KELVIN_SCALE.symbol, 'K')
        self.assertTrue(KELVIN_SCALE.is_measurement_scale)
        self.assertEqual(KELVIN_SCALE, RatioScale(KELVIN))
        self.assertEqual(hash(KELVIN_SCALE), hash(RatioScale(KELVIN)))
        self.assertNotEqual(KELVIN_SCALE, RatioScale(METRE))

    def test_interval(self):
        from pymensura.units import (CELSIUS_SCALE, DEGREE_CELSIUS,
                                     FAHRENHEIT_SCALE, IntervalScale,
                                     KELVIN, KELVIN_SCALE, Measure, METRE,
                                     ONE, ScaleError, ScaleValidationError)

        self.assertIs(CELSIUS_SCALE.ratio_scale, KELVIN_SCALE)
        self.assertEqual(CELSIUS_SCALE.offset_value, -273.15)
        self.assertEqual(CELSIUS_SCALE.symbol, '°C')

        # Offset can be given in any compatible unit.
        celsius = IntervalScale(DEGREE_CELSIUS, ratio_scale=KELVIN_SCALE,
                                offset=Measure(-273.15, KELVIN))
        self.assertEqual(celsius, CELSIUS_SCALE)
        self.assertNotEqual(FAHRENHEIT_SCALE, CELSIUS_SCALE)

        # Unanchored scales are only equal to themselves.
        unanchored = IntervalScale(ONE, 'x')
        self.assertEqual(unanchored, unanchored)
        self.assertNotEqual(unanchored, IntervalScale(ONE, 'x'))
        self.assertIsNone(unanchored.ratio_scale)

        with self.assertRaises(ValueError):
            IntervalScale(DEGREE_CELSIUS, ratio_scale=KELVIN_SCALE)

        with self.assertRaises(ScaleValidationError) as cm:
            IntervalScale(METRE, ratio_scale=KELVIN_SCALE,
                          offset=Measure(1.0, METRE))
        self.assertEqual(cm.exception.reason,
                         ScaleError.DIFFERENT_DIMENSIONALITY)


class TestScaleConversion(TestCase):
    def test_round_trip(self):
        from pymensura.units import (CELSIUS_SCALE, FAHRENHEIT_SCALE,
                                     KELVIN_SCALE, Measure, REAUMUR_SCALE)

        zero = Measure(0.0, scale=KELVIN_SCALE)
        zero_c = zero.convert(CELSIUS_SCALE)
        self.assertIs(zero_c.scale, CELSIUS_SCALE)
        self.assertAlmostEqual(zero_c.scalar_value, -273.15)
        self.assertAlmostEqual(
            zero_c.convert(KELVIN_SCALE).scalar_value, 0.0)

        scales = (CELSIUS_SCALE, FAHRENHEIT_SCALE, REAUMUR_SCALE,
                  KELVIN_SCALE)
        for s1 in scales:
            for s2 in scales:
                for value in (0.0, 15.5, 1000.0):
                    m = Measure(value, scale=s1)
                    back = m.convert(s2).convert(s1)
                    self.assertAlmostEqual(back.scalar_value, value,
                                           places=9)
                    self.assertIs(back.scale, s1)

    def test_pivot(self):
        from pymensura.units import (CELSIUS_SCALE, FAHRENHEIT_SCALE,
                                     Measure, REAUMUR_SCALE)

        # Réaumur and Fahrenheit are related only via Kelvin.
        t = Measure(100.0, scale=REAUMUR_SCALE).convert(FAHRENHEIT_SCALE)
        self.assertAlmostEqual(t.scalar_value, 257.0, delta=1e-6)
        self.assertIs(t.scale, FAHRENHEIT_SCALE)

        t = Measure(100.0, scale=CELSIUS_SCALE).convert(FAHRENHEIT_SCALE)
        self.assertAlmostEqual(t.scalar_value, 212.0, delta=1e-6)
        t = Measure(-40.0, scale=FAHRENHEIT_SCALE).convert(CELSIUS_SCALE)
        self.assertAlmostEqual(t.scalar_value, -40.0, delta=1e-6)

    def test_identity(self):
        from pymensura.units import (CELSIUS_SCALE, DEGREE_CELSIUS,
                                     IntervalScale, KELVIN_SCALE, Measure)
        from pymensura.units import _measure

        m = Measure(21.0, scale=CELSIUS_SCALE, error=0.5)
        celsius = IntervalScale(DEGREE_CELSIUS, ratio_scale=KELVIN_SCALE,
                                offset=Measure(-273.15, DEGREE_CELSIUS))
        with mock.patch.object(_measure, '_ratio_scale_for') as spy:
            self.assertIs(m.convert(CELSIUS_SCALE), m)
            self.assertIs(m.convert(celsius), m)
        spy.assert_not_called()

        # Other scales use the ratio scale.
        with mock.patch.object(_measure, '_ratio_scale_for',
                               wraps=_measure._ratio_scale_for) as spy:
            m.convert(KELVIN_SCALE)
        spy.assert_called()

    def test_error_scaling(self):
        from pymensura.units import (CELSIUS_SCALE, FAHRENHEIT_SCALE,
                                     KELVIN_SCALE, Measure)

        # Errors are scaled, never offset.
        t = Measure(10.0, scale=CELSIUS_SCALE, error=0.5)
        self.assertAlmostEqual(t.convert(KELVIN_SCALE).error, 0.5)
        self.assertAlmostEqual(t.convert(FAHRENHEIT_SCALE).error, 0.9)

        t = Measure(50.0, scale=FAHRENHEIT_SCALE, error=1.8)
        self.assertAlmostEqual(t.convert(CELSIUS_SCALE).error, 1.0)
        self.assertAlmostEqual(t.convert(KELVIN_SCALE).error, 1.0)

    def test_failures(self):
        from pymensura.units import (CELSIUS_SCALE, KELVIN, KELVIN_SCALE,
                                     MAGNITUDE_SCALE, Measure, METRE,
                                     NominalScale, OrdinalScale, RatioScale,
                                     ScaleError, ScaleValidationError,
                                     UnitError, UnitValidationError)

        with self.assertRaises(UnitValidationError) as cm:
            Measure(1.0, KELVIN).convert(KELVIN_SCALE)
        self.assertEqual(cm.exception.reason,
                         UnitError.CANNOT_CONVERT_UNIT_TO_SCALE)

        with self.assertRaises(ScaleValidationError) as cm:
            Measure(1.0, scale=KELVIN_SCALE).convert(KELVIN)
        self.assertEqual(cm.exception.reason,
                         ScaleError.CANNOT_CONVERT_SCALE_TO_UNIT)

        # Dimensions are checked before the scale.
        with self.assertRaises(UnitValidationError) as cm:
            Measure(1.0, scale=KELVIN_SCALE).convert(METRE)
        self.assertEqual(cm.exception.reason,
                         UnitError.DIFFERENT_DIMENSIONALITY)

        with self.assertRaises(ScaleValidationError) as cm:
            Measure(1.0, scale=CELSIUS_SCALE).convert(MAGNITUDE_SCALE)
        self.assertEqual(cm.exception.reason,
                         ScaleError.NOT_LINKED_TO_RATIO_SCALE)

        with self.assertRaises(ScaleValidationError) as cm:
            Measure(1.0, scale=KELVIN_SCALE).convert(RatioScale(METRE))
        self.assertEqual(cm.exception.reason,
                         ScaleError.NO_COMMON_RATIO_SCALE)

        grades = OrdinalScale(['low', 'high'])
        with self.assertRaises(ScaleValidationError) as cm:
            Measure('low', scale=grades).convert(KELVIN_SCALE)
        self.assertEqual(cm.exception.reason,
                         ScaleError.CANNOT_CONVERT_NOMINAL_OR_ORDINAL_SCALE)
        with self.assertRaises(ScaleValidationError) as cm:
            Measure('low', scale=grades).convert(NominalScale(['low']))
        self.assertEqual(cm.exception.reason,
                         ScaleError.CANNOT_CONVERT_NOMINAL_OR_ORDINAL_SCALE)

        # Below absolute zero.
        with self.assertRaises(ScaleValidationError) as cm:
            Measure(-300.0, scale=CELSIUS_SCALE).convert(KELVIN_SCALE)
        self.assertEqual(cm.exception.reason,
                         ScaleError.NEGATIVE_VALUE_IN_RATIO_SCALE)
