"""
XmlInjection Exceptions

Custom exception hierarchy for the XmlInjection bean definition loader
"""


class XmlInjectionError(Exception):
    """
    Base exception for all XmlInjection errors.

    All XmlInjection-specific exceptions inherit from this class.
    You can catch this to handle any definition loading error generically.

    Example:
        >>> try:
        ...     definition = driver.get_definition("userService")
        ... except XmlInjectionError as e:
        ...     print(f"Definition error: {e}")
    """

    pass


class ConfigError(XmlInjectionError):
    """
    Raised when the bean configuration is structurally invalid.

    This is the common base of every error caused by the XML documents
    themselves, as opposed to a bean that simply is not declared.
    """

    pass


class ConfigLoadError(ConfigError):
    """
    Raised when the configuration documents cannot be loaded.

    Base class of the errors raised by ``DocumentResolver.resolve()``.
    """

    pass


class ConfigNotFoundError(ConfigLoadError):
    """
    Raised when a configuration document does not exist.

    This error occurs both for the root document given to the driver
    and for any document referenced by an ``<import resource="..."/>``.

    Common causes:
        - Typo in the ``filename`` option
        - Relative path resolved against an unexpected directory
        - Imported file moved or renamed

    Solution:
        Use an absolute path for the root document, or set ``base_path``
        so relative imports are resolved where you expect::

            options = XmlDriverOptions(
                filename="/etc/app/beans.xml",
                base_path="/etc/app",
            )
    """

    pass


class ConfigParseError(ConfigLoadError):
    """
    Raised when a configuration document is not well-formed XML.

    The message contains the document path and every diagnostic
    reported by the XML parser, including line and column.

    Common causes:
        - Unclosed tags
        - Unescaped ``&`` or ``<`` inside ``<eval>`` expressions
        - Empty files

    Solution:
        Fix the markup, wrapping expressions in CDATA if needed::

            <eval><![CDATA[ $a < $b ]]></eval>
    """

    pass


class CyclicImportError(ConfigLoadError):
    """
    Raised when documents import each other in a cycle.

    Example of a cycle::

        <!-- a.xml -->
        <beans><import resource="b.xml"/></beans>

        <!-- b.xml -->
        <beans><import resource="a.xml"/></beans>

    Solution:
        Move the shared beans to a third document and import it from
        both files instead.
    """

    pass


class InvalidScopeError(ConfigError):
    """
    Raised when a bean's ``scope`` attribute is not a known scope.

    Only ``singleton`` and ``prototype`` are recognized. The attribute
    is required, so a missing scope raises this error too.

    Solution:
        Declare one of the known scopes::

            <bean id="userService" class="UserService" scope="singleton"/>
    """

    pass


class InvalidAspectTypeError(ConfigError):
    """
    Raised when an ``<aspect>`` ``type`` attribute is not a known type.

    Only ``method`` and ``exception`` are recognized.

    Solution:
        Declare one of the known aspect types::

            <aspect ref="logAspect" type="method">
                <pointcut expression="^get.*"/>
            </aspect>
    """

    pass


class MissingAttributeError(ConfigError):
    """
    Raised when a required attribute or child node is missing.

    Common causes:
        - ``<bean>`` without a ``class`` attribute
        - ``<aspect>`` without a ``ref`` attribute or any ``<pointcut>``
        - ``<pointcut>`` without an ``expression`` attribute
    """

    pass


class BeanNotFoundError(XmlInjectionError):
    """
    Raised when no definition source declares the requested bean.

    A single driver never raises this error: a miss is reported as
    ``None`` so several definition sources can be chained. It is raised
    by ``DefinitionSourceChain`` once every source has been consulted.

    Common causes:
        - Typo in the bean id or in a ``<ref bean="..."/>``
        - The document declaring the bean is not imported

    Solution:
        Declare the bean, or import the document that declares it::

            <beans>
                <import resource="services.xml"/>
            </beans>

    Note:
        The error message lists the sources that were consulted.
    """

    pass
