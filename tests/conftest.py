"""
Test Configuration and Utilities

Common base classes and helper functions for XmlInjection tests
"""

import os
import shutil
import tempfile
import unittest
from xml.etree import ElementTree


class XmlInjectionTestCase(unittest.TestCase):
    """
    Base test case class for XmlInjection tests.

    Creates a temporary directory before each test and removes it
    afterwards. Use write_document() to create bean documents in it.
    """

    def setUp(self):
        """Create a scratch directory for bean documents"""
        self.tmpdir = tempfile.mkdtemp(prefix='xmlinjection-')

    def tearDown(self):
        """Remove the scratch directory"""
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def write_document(self, name: str, content: str) -> str:
        """
        Write a document into the scratch directory.

        Args:
            name: File name, may contain sub directories
            content: Document content

        Returns:
            The absolute path of the written file
        """
        path = os.path.join(self.tmpdir, name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        return path

    def write_beans(self, name: str, *declarations: str) -> str:
        """
        Write a ``<beans>`` document holding the given declarations.

        Example:
            >>> self.write_beans('beans.xml', '<bean id="a" class="A" scope="singleton"/>')
        """
        return self.write_document(
            name, '<beans>\n' + '\n'.join(declarations) + '\n</beans>\n'
        )


def node(markup: str) -> ElementTree.Element:
    """
    Parse an XML fragment into an element.

    Example:
        >>> node('<property name="a"><true/></property>').get('name')
        'a'
    """
    return ElementTree.fromstring(markup)
