from unittest import TestCase


class TestDimensions(TestCase):
    def test___init__(self):
        from pymensura.units import Dimension, Dimensions

        acc = Dimensions(L=1, T=-2)
        self.assertEqual(acc[Dimension.LENGTH], 1.0)
        self.assertEqual(acc[Dimension.TIME], -2.0)
        self.assertEqual(acc[Dimension.MASS], 0.0)  # Missing -> zero.

        # Mapping and symbol forms are the same.
        self.assertEqual(Dimensions({Dimension.TEMPERATURE: 1}),
                         Dimensions(θ=1))

        with self.assertRaises(KeyError):
            Dimensions(X=1)

    def test_algebra(self):
        from pymensura.units import Dimensions

        length, time = Dimensions(L=1), Dimensions(T=1)
        self.assertEqual(length / time / time, Dimensions(L=1, T=-2))
        self.assertEqual(length * length, Dimensions(L=2))
        self.assertEqual(Dimensions(L=2) ** 0.5, length)
        self.assertEqual(length ** 3, Dimensions(L=3))
        self.assertTrue((length / length).is_dimensionless())
        self.assertFalse(length.is_dimensionless())

    def test___eq__(self):
        from pymensura.units import Dimensions, unit_options

        # Small floating point differences are ignored.
        self.assertEqual(Dimensions(L=1.0002), Dimensions(L=1))
        self.assertNotEqual(Dimensions(L=1.002), Dimensions(L=1))
        self.assertEqual(hash(Dimensions(L=1 / 3) * Dimensions(L=2 / 3)),
                         hash(Dimensions(L=1)))

        # Negative zero is the same as zero.
        self.assertEqual(hash(Dimensions(L=-0.0)), hash(Dimensions()))

        with unit_options(dimension_decimals=5):
            self.assertNotEqual(Dimensions(L=1.0002), Dimensions(L=1))

    def test___str__(self):
        from pymensura.units import Dimension, Dimensions, DIMENSIONLESS

        acc = Dimensions(L=1, T=-2)
        self.assertEqual(repr(acc), 'Dimensions(T=-2, L=1)')
        self.assertEqual(str(acc), '(T=-2, L=1)')
        self.assertEqual(str(Dimensions(L=0.5)), '(L=0.5)')
        self.assertEqual(repr(DIMENSIONLESS), 'Dimensions()')
        self.assertEqual(dict(acc), {Dimension.TIME: -2.0,
                                     Dimension.LENGTH: 1.0})
