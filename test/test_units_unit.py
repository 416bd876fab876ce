from unittest import TestCase


class TestBaseUnit(TestCase):
    def test___init__(self):
        from pymensura.units import (BaseUnit, Dimension, Dimensions, METRE,
                                     ONE)

        furlong = BaseUnit('fur', Dimension.LENGTH)
        self.assertTrue(furlong.is_base_unit)
        self.assertIs(furlong.base_unit, furlong)
        self.assertEqual(furlong.conversion_factor, 1.0)
        self.assertEqual(furlong.dimensions, Dimensions(L=1))
        self.assertEqual(furlong.dimension, Dimension.LENGTH)

        self.assertTrue(ONE.dimensions.is_dimensionless())
        self.assertEqual(ONE.symbol, '')

        # Same dimensions but a different base unit.
        self.assertNotEqual(furlong, METRE)
        self.assertEqual(BaseUnit('m', Dimension.LENGTH), METRE)

    def test_factor_to(self):
        from pymensura.units import (BaseUnit, Dimension, KILOMETRE, METRE,
                                     SECOND, UnitError, UnitValidationError)

        self.assertEqual(KILOMETRE.factor_to(METRE), 1000.0)
        self.assertEqual(METRE.factor_to(KILOMETRE), 0.001)

        with self.assertRaises(UnitValidationError) as cm:
            METRE.factor_to(SECOND)
        self.assertEqual(cm.exception.reason,
                         UnitError.DIFFERENT_DIMENSIONALITY)

        with self.assertRaises(UnitValidationError) as cm:
            METRE.factor_to(BaseUnit('ft', Dimension.LENGTH))
        self.assertEqual(cm.exception.reason, UnitError.NO_COMMON_BASE_UNIT)

    def test___add__(self):
        # Also tests __sub__.
        from pymensura.units import (KILOMETRE, METRE, SECOND, UnitError,
                                     UnitValidationError)

        self.assertIs(METRE + KILOMETRE, METRE)
        self.assertIs(KILOMETRE - METRE, KILOMETRE)
        with self.assertRaises(UnitValidationError) as cm:
            METRE + SECOND
        self.assertEqual(cm.exception.reason,
                         UnitError.DIFFERENT_DIMENSIONALITY)
        with self.assertRaises(UnitValidationError):
            SECOND - METRE


class TestPrefixedUnit(TestCase):
    def test___init__(self):
        from pymensura.units import KILO, KILOMETRE, METRE, PrefixedUnit

        self.assertEqual(KILOMETRE.symbol, 'km')
        self.assertEqual(KILOMETRE.conversion_factor, 1000.0)
        self.assertIs(KILOMETRE.base_unit, METRE)
        self.assertFalse(KILOMETRE.is_base_unit)
        self.assertEqual(PrefixedUnit(KILO, METRE), KILOMETRE)

    def test_base_unit_replacement(self):
        from pymensura.units import (BaseUnit, Dimension, GRAM, KILO,
                                     KILOGRAM, METRE, SECOND, PrefixedUnit)

        # The kilogram is the base unit of mass.
        self.assertTrue(KILOGRAM.is_base_unit)
        self.assertEqual(KILOGRAM.symbol, 'kg')
        self.assertIs(GRAM.base_unit, KILOGRAM)
        self.assertAlmostEqual(GRAM.conversion_factor, 0.001)
        self.assertAlmostEqual(GRAM.factor_to(KILOGRAM), 0.001)

        # Once only.
        with self.assertRaises(ValueError):
            PrefixedUnit(KILO, GRAM, is_base_unit=True)

        # Only single dimension base units.
        with self.assertRaises(ValueError):
            PrefixedUnit(KILO, METRE / SECOND, is_base_unit=True)

        slug = BaseUnit('sl', Dimension.MASS)
        kslug = PrefixedUnit(KILO, slug, 'ksl', is_base_unit=True)
        self.assertEqual(kslug.symbol, 'ksl')
        self.assertIs(slug.base_unit, kslug)


class TestUnitMultiple(TestCase):
    def test_symbol(self):
        from pymensura.units import METRE, UnitMultiple

        self.assertEqual(UnitMultiple(100.0, METRE).symbol, '100m')
        self.assertEqual(UnitMultiple(100.12310001, METRE).symbol,
                         '100.1231m')
        self.assertEqual(UnitMultiple(0.5, METRE).symbol, '0.5m')
        self.assertEqual(UnitMultiple(3600, METRE, 'xyz').symbol, 'xyz')

        # No short representation.
        with self.assertWarns(UserWarning):
            third = UnitMultiple(1 / 3, METRE)
        self.assertEqual(third.symbol, repr(1 / 3) + 'm')

    def test___init__(self):
        from pymensura.units import HOUR, MINUTE, SECOND, UnitMultiple

        self.assertEqual(HOUR.conversion_factor, 3600.0)
        self.assertIs(HOUR.base_unit, SECOND)
        self.assertEqual(HOUR.factor, 3600.0)
        self.assertEqual(UnitMultiple(60, MINUTE), HOUR)
        self.assertNotEqual(UnitMultiple(61, MINUTE), HOUR)


class TestDerivedUnits(TestCase):
    def test_equivalent(self):
        from pymensura.units import (HERTZ, JOULE, KILOGRAM, METRE, NEWTON,
                                     ONE, SECOND, DEGREE_CELSIUS, KELVIN,
                                     WATT)

        self.assertEqual(NEWTON, KILOGRAM * METRE / SECOND ** 2)
        self.assertEqual(JOULE, NEWTON * METRE)
        self.assertEqual(WATT, KILOGRAM * METRE ** 2 / SECOND ** 3)
        self.assertEqual(HERTZ, ONE / SECOND)
        self.assertEqual(DEGREE_CELSIUS, KELVIN)
        self.assertEqual(hash(NEWTON), hash(KILOGRAM * METRE / SECOND ** 2))
        self.assertEqual(NEWTON.symbol, 'N')

    def test_base_unit(self):
        from pymensura.units import (HOUR, KILOMETRE, METRE, SECOND,
                                     get_unit)

        m_per_s = METRE / SECOND
        self.assertTrue(m_per_s.is_base_unit)
        self.assertEqual(m_per_s.conversion_factor, 1.0)

        km_per_h = get_unit('kilometre_per_hour')
        self.assertFalse(km_per_h.is_base_unit)
        self.assertEqual(km_per_h.base_unit, m_per_s)
        self.assertAlmostEqual(km_per_h.conversion_factor, 1000 / 3600)
        self.assertEqual(km_per_h, KILOMETRE / HOUR)

        km2 = KILOMETRE ** 2
        self.assertEqual(km2.base_unit, METRE ** 2)
        self.assertAlmostEqual(km2.conversion_factor, 1e6)

    def test_fractional_exponent(self):
        from pymensura.units import Dimensions, KILOMETRE, METRE

        root = (METRE ** 2) ** 0.5
        self.assertEqual(root.dimensions, Dimensions(L=1))
        self.assertEqual(root, METRE)
        self.assertAlmostEqual(((KILOMETRE ** 3) ** (1 / 3)).factor_to(
            METRE), 1000.0)

    def test_cancelled_units(self):
        from pymensura.units import METRE, ONE, RADIAN, SECOND

        # Units that cancel out give the same base units.
        self.assertEqual(METRE * SECOND / SECOND, METRE)
        self.assertEqual(RADIAN, ONE)
        self.assertTrue(RADIAN.dimensions.is_dimensionless())

    def test_cancelled_fractional_exponents(self):
        from pymensura.units import Measure, METRE, ONE

        # 0.1 + 0.2 - 0.3 leaves a tiny float remainder.
        unit = METRE ** 0.1 * METRE ** 0.2 / METRE ** 0.3
        self.assertEqual(unit, ONE)
        self.assertEqual(hash(unit), hash(ONE))
        self.assertTrue(unit.dimensions.is_dimensionless())
        self.assertAlmostEqual(Measure(2.0, unit).convert(ONE).scalar_value,
                               2.0)

    def test_symbol(self):
        from pymensura.units import (JOULE, KELVIN, KILOGRAM, METRE, ONE,
                                     SECOND, unit_options)

        self.assertEqual((METRE / SECOND ** 2).symbol, 'm/s²')
        self.assertEqual((KILOGRAM * METRE).symbol, 'kg·m')
        self.assertEqual((ONE / SECOND).symbol, '1/s')
        self.assertEqual((METRE / SECOND).symbol, 'm/s')
        self.assertEqual(((METRE / SECOND) ** 2).symbol, '(m/s)²')
        self.assertEqual((JOULE / (KILOGRAM * KELVIN)).symbol, 'J/(kg·K)')
        self.assertEqual((METRE ** 0.5).symbol, 'm⁰ᐧ⁵')
        self.assertEqual((METRE ** -1).symbol, 'm⁻¹')

        with unit_options(unicode_str=False):
            self.assertEqual((METRE ** 2).symbol, 'm^2')


class TestCompoundUnit(TestCase):
    def test___init__(self):
        from pymensura.units import (ARCMINUTE, ARCSECOND, CompoundUnit,
                                     DEGREE, DEGREE_ARCMINUTE_ARCSECOND)

        dms = CompoundUnit([DEGREE, ARCMINUTE, ARCSECOND])
        self.assertEqual(dms.partial_units, (DEGREE, ARCMINUTE, ARCSECOND))
        self.assertEqual(dms.error_units, dms.partial_units)
        self.assertEqual(dms.conversion_factor, DEGREE.conversion_factor)
        self.assertEqual(dms.dimensions, DEGREE.dimensions)
        self.assertFalse(dms.display_sign)
        self.assertEqual(dms.symbol, '° \' "')

        self.assertEqual(len(DEGREE_ARCMINUTE_ARCSECOND.error_units), 5)

        # A single unit is allowed.
        self.assertEqual(CompoundUnit([DEGREE]).partial_units, (DEGREE,))

    def test_validation(self):
        from pymensura.units import (ARCMINUTE, ARCSECOND, CompoundUnit,
                                     DEGREE, METRE, UnitError,
                                     UnitValidationError)

        with self.assertRaises(UnitValidationError) as cm:
            CompoundUnit([])
        self.assertEqual(cm.exception.reason,
                         UnitError.NO_PARTIAL_UNITS_DEFINED)

        with self.assertRaises(UnitValidationError) as cm:
            CompoundUnit([DEGREE, METRE])
        self.assertEqual(cm.exception.reason,
                         UnitError.DIFFERENT_DIMENSIONALITY)

        # Increasing size and equal size are both illegal.
        for units in ([ARCSECOND, DEGREE], [DEGREE, ARCSECOND, ARCMINUTE],
                      [DEGREE, DEGREE]):
            with self.assertRaises(UnitValidationError) as cm:
                CompoundUnit(units)
            self.assertEqual(cm.exception.reason,
                             UnitError.PARTIAL_UNIT_IN_ILLEGAL_ORDER)

        # Extra error units must also be smaller.
        with self.assertRaises(UnitValidationError) as cm:
            CompoundUnit([DEGREE, ARCMINUTE], extra_error_units=[DEGREE])
        self.assertEqual(cm.exception.reason,
                         UnitError.PARTIAL_UNIT_IN_ILLEGAL_ORDER)
