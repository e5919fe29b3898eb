"""
Aspect Extractor Tests

Tests for turning <aspect> nodes into aspect definitions.
"""

import unittest

from conftest import node
from xmlinjection.aspect import AspectDefinition, AspectType
from xmlinjection.aspect_extractor import AspectExtractor
from xmlinjection.exceptions import ConfigError, InvalidAspectTypeError, MissingAttributeError


class TestAspectExtractor(unittest.TestCase):
    """Test AspectExtractor.extract()."""

    def setUp(self):
        self.extractor = AspectExtractor()

    def test_method_aspect(self):
        """A method aspect is bound to its pointcut and bean."""
        aspect = self.extractor.extract(node(
            '<aspect ref="timer" type="method"><pointcut expression="^find.*"/></aspect>'
        ))
        self.assertEqual(aspect, AspectDefinition(
            pointcut='^find.*', aspect_type=AspectType.METHOD, bean_name='timer'
        ))

    def test_exception_aspect(self):
        """An exception aspect maps to AspectType.EXCEPTION."""
        aspect = self.extractor.extract(node(
            '<aspect ref="handler" type="exception"><pointcut expression=".*"/></aspect>'
        ))
        self.assertEqual(aspect.aspect_type, AspectType.EXCEPTION)

    def test_last_pointcut_wins(self):
        """With several pointcuts only the last one is kept."""
        aspect = self.extractor.extract(node(
            '<aspect ref="timer" type="method">'
            '<pointcut expression="first"/>'
            '<pointcut expression="second"/>'
            '</aspect>'
        ))
        self.assertEqual(aspect.pointcut, 'second')

    def test_invalid_type(self):
        """An unknown type raises InvalidAspectTypeError."""
        with self.assertRaises(InvalidAspectTypeError) as ctx:
            self.extractor.extract(node(
                '<aspect ref="timer" type="around"><pointcut expression="x"/></aspect>'
            ))
        self.assertIn("around", str(ctx.exception))
        self.assertIsInstance(ctx.exception, ConfigError)

    def test_missing_type(self):
        """A missing type is not a known type either."""
        with self.assertRaises(InvalidAspectTypeError):
            self.extractor.extract(node(
                '<aspect ref="timer"><pointcut expression="x"/></aspect>'
            ))

    def test_missing_ref(self):
        """An aspect without ref raises MissingAttributeError."""
        with self.assertRaises(MissingAttributeError):
            self.extractor.extract(node(
                '<aspect type="method"><pointcut expression="x"/></aspect>'
            ))

    def test_missing_pointcut(self):
        """An aspect without pointcut raises MissingAttributeError."""
        with self.assertRaises(MissingAttributeError) as ctx:
            self.extractor.extract(node('<aspect ref="timer" type="method"/>'), 'svc')
        self.assertIn("svc", str(ctx.exception))

    def test_missing_expression(self):
        """A pointcut without expression raises MissingAttributeError."""
        with self.assertRaises(MissingAttributeError):
            self.extractor.extract(node(
                '<aspect ref="timer" type="method"><pointcut/></aspect>'
            ))


if __name__ == '__main__':
    unittest.main()
