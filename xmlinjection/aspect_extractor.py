"""
AspectExtractor

Turns an ``<aspect>`` node into an AspectDefinition.
"""

from xml.etree.ElementTree import Element

from .aspect import AspectDefinition, AspectType
from .exceptions import MissingAttributeError


class AspectExtractor:
    """Extracts aspect definitions from ``<aspect>`` nodes.

    Example node::

        <aspect ref="loggingAspect" type="method">
            <pointcut expression="^find.*"/>
        </aspect>
    """

    def extract(self, node: Element, bean_name: str = '') -> AspectDefinition:
        """Extract the aspect declared by ``node``.

        An aspect node binds a single pointcut: when several ``<pointcut>``
        children are declared, the last one is used.

        Args:
            node: The ``<aspect>`` element
            bean_name: Declaring bean, used in error messages

        Raises:
            InvalidAspectTypeError: When ``type`` is not method or exception
            MissingAttributeError: When ``ref``, the pointcut or its
                expression is missing
        """
        aspect_type = AspectType.parse(node.get('type', ''))

        ref = node.get('ref')
        if not ref:
            raise MissingAttributeError(
                f"<aspect> without a 'ref' attribute in bean '{bean_name}'"
            )

        pointcuts = node.findall('pointcut')
        if not pointcuts:
            raise MissingAttributeError(
                f"<aspect ref=\"{ref}\"> declares no <pointcut> in bean '{bean_name}'"
            )

        aspect = None
        for pointcut in pointcuts:
            expression = pointcut.get('expression')
            if expression is None:
                raise MissingAttributeError(
                    f"<pointcut> without an 'expression' attribute in aspect "
                    f"'{ref}' of bean '{bean_name}'"
                )
            aspect = AspectDefinition(
                pointcut=expression,
                aspect_type=aspect_type,
                bean_name=ref,
            )
        return aspect
