# -*- coding: utf-8 -*-
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License version 3 for
# more details.
#
# You should have received a copy of the GNU General Public License version 3
# along with this program; if not, write to the Free Software Foundation, Inc., 51
# Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
#
# (c) 2015-2016 Valentin Samir
"""CAS service ticket validation"""
import logging
from collections import namedtuple
from urllib.parse import urlparse, urlunparse

import requests
from lxml import etree

from .utils import to_unicode, to_bytes

#: logger facility
logger = logging.getLogger(__name__)

#: a `<cas:authenticationSuccess>` node (or CAS 1.0 result lines) has been found
FOUND = 'found'
#: the response has been parsed but holds no authentication success
NOT_FOUND = 'not_found'
#: the CAS server returned an empty response
EMPTY_BODY = 'empty_body'
#: the CAS 1.0 server answered ``no``
REJECTED = 'rejected'
#: the CAS 2.0+ response is not well formed XML
SYNTAX_ERROR = 'syntax_error'


class SuccessLookup(namedtuple('SuccessLookup', ['outcome', 'node'])):
    """
        Result of the search of the authentication success in a CAS response

        :param unicode outcome: One of :obj:`FOUND`, :obj:`NOT_FOUND`, :obj:`EMPTY_BODY`,
            :obj:`REJECTED` or :obj:`SYNTAX_ERROR`
        :param node: The success node if ``outcome`` is :obj:`FOUND`, else ``None``
    """
    __slots__ = ()

    @property
    def found(self):
        """``True`` if the lookup found an authentication success"""
        return self.outcome == FOUND


class CAS1ResponseParser:
    """Parser for the plaintext CAS 1.0 ``/validate`` responses"""

    #: charset tried on bytes bodies if the server did not announce one
    default_charset = "utf-8"
    #: charset used if the announced one cannot decode the body. Decodes any bytes.
    fallback_charset = "latin-1"

    def decode(self, body, charset=None):
        """
            :param body: The CAS server response
            :param unicode charset: The charset announced by the CAS server, if any
            :return: ``body`` as unicode
            :rtype: unicode
        """
        try:
            return to_unicode(body, charset or self.default_charset)
        except (UnicodeDecodeError, LookupError):
            logger.warning(
                "CAS response not in %s, decoding it as %s" % (
                    charset or self.default_charset,
                    self.fallback_charset
                )
            )
            return to_unicode(body, self.fallback_charset)

    def find_authentication_success(self, body, charset=None):
        """
            :param body: The CAS server response
            :param unicode charset: The charset announced by the CAS server, if any
            :return: A :class:`SuccessLookup` whose node is the list of the response lines
            :rtype: SuccessLookup
        """
        if not body:
            return SuccessLookup(EMPTY_BODY, None)
        lines = [line.rstrip(u"\r") for line in self.decode(body, charset).split(u"\n")]
        while lines and not lines[-1]:
            lines.pop()
        if not lines:
            return SuccessLookup(EMPTY_BODY, None)
        if lines[0] == 'no':
            return SuccessLookup(REJECTED, None)
        return SuccessLookup(FOUND, lines)

    def parse_user_info(self, lines):
        """
            :param list lines: The lines of a successful CAS 1.0 response
            :return: The username under ``name`` and the remaining lines under ``extra_info``
            :rtype: dict
        """
        if lines is None:
            return None
        return {
            'name': lines[1] if len(lines) > 1 else None,
            'extra_info': lines[2:],
        }


class CAS2ResponseParser:
    """Parser for the XML CAS 2.0+ ``/serviceValidate`` responses"""

    #: XPath of the success node in a namespaced response
    SUCCESS_XPATH = '/cas:serviceResponse/cas:authenticationSuccess'
    #: XPath of the success node if the response does not declare the ``cas`` namespace
    SUCCESS_XPATH_NO_NS = '/serviceResponse/authenticationSuccess'

    @staticmethod
    def xml_parser():
        """
            :return: A XML parser not resolving entities nor reaching the network
            :rtype: lxml.etree.XMLParser
        """
        return etree.XMLParser(resolve_entities=False, no_network=True)

    def find_authentication_success(self, body, charset=None):
        """
            :param body: The CAS server response
            :param unicode charset: Ignored, the XML declaration gives the encoding
            :return: A :class:`SuccessLookup` whose node is the first
                `<cas:authenticationSuccess>` element
            :rtype: SuccessLookup
        """
        if not body:
            return SuccessLookup(EMPTY_BODY, None)
        try:
            root = etree.fromstring(to_bytes(body), self.xml_parser())
        except etree.XMLSyntaxError as error:
            logger.warning("Malformed CAS response: %s" % error)
            return SuccessLookup(SYNTAX_ERROR, None)
        namespaces = {prefix: uri for (prefix, uri) in root.nsmap.items() if prefix}
        try:
            nodes = root.xpath(self.SUCCESS_XPATH, namespaces=namespaces)
        # the cas prefix is not declared in the response
        except etree.XPathEvalError:
            nodes = root.xpath(self.SUCCESS_XPATH_NO_NS)
        if nodes:
            return SuccessLookup(FOUND, nodes[0])
        return SuccessLookup(NOT_FOUND, None)

    @staticmethod
    def local_name(element):
        """
            :param lxml.etree._Element element: A XML element
            :return: The tag of ``element`` without namespace nor ``cas:`` prefix
            :rtype: unicode
        """
        tag = element.tag.split(u"}").pop()
        if tag.startswith(u"cas:"):
            tag = tag[len(u"cas:"):]
        return tag

    @staticmethod
    def element_children(element):
        """
            :param lxml.etree._Element element: A XML element
            :return: The children of ``element`` that are elements
            :rtype: list
        """
        return [child for child in element if isinstance(child.tag, str)]

    def parse_user_info(self, node):
        """
            turns an `<cas:authenticationSuccess>` node into a dict

            :param node: A `<cas:authenticationSuccess>` element or ``None``
            :return: ``None`` if ``node`` is ``None``, else the flattened children of ``node``
            :rtype: dict
        """
        if node is None:
            return None
        user_info = {}
        for element in self.element_children(node):
            name = self.local_name(element)
            if name == u'proxies':
                continue
            if not self.element_children(element):
                user_info[name] = str(element.xpath('string()'))
            # JASIG style extra attributes
            elif name == u'attributes':
                user_info.update(self.parse_user_info(element))
            else:
                if not isinstance(user_info.get(name), list):
                    user_info[name] = []
                user_info[name].append(self.parse_user_info(element))
        return user_info


class ServiceTicketValidator:
    """
        Validate a service ticket against a CAS server

        :param strategy: An object with a ``service_validate_url(return_to_url, ticket)`` method,
            typically a :class:`cas_validator.strategy.CASStrategy`
        :param options: An object with ``is_cas_1()`` and ``get_ssl_verify()`` methods,
            typically a :class:`cas_validator.strategy.CASOptions`
        :param unicode return_to_url: The URL of this CAS client service
        :param unicode ticket: The service ticket to validate
    """
    #: headers sent with the validation request
    VALIDATION_REQUEST_HEADERS = {'Accept': '*/*'}

    def __init__(self, strategy, options, return_to_url, ticket):
        self.options = options
        self.url = self.secure_url(strategy.service_validate_url(return_to_url, ticket))
        if options.is_cas_1():
            self.parser = CAS1ResponseParser()
        else:
            self.parser = CAS2ResponseParser()

    @staticmethod
    def secure_url(url):
        """
            :param unicode url: A validation URL
            :return: ``url`` with a https scheme if it targets the port 443, else ``url``
            :rtype: unicode
        """
        url_parts = urlparse(url)
        if url_parts.scheme == u'http' and url_parts.port == 443:
            return urlunparse(url_parts._replace(scheme=u'https'))
        return url

    @staticmethod
    def get_page_charset(response):
        """
            :param requests.Response response: A CAS server response
            :return: The charset announced in the Content-Type header, ``None`` if missing
            :rtype: unicode
        """
        content_type = response.headers.get('Content-Type')
        if content_type and "charset=" in content_type:
            return content_type.split("charset=")[-1].split(";")[0].strip().strip('"')
        return None

    def fetch_user_info(self):
        """
            Request the validation of the ticket to the CAS server

            Swallows all XML parsing errors (and returns ``None`` in those cases).

            :return: A user information dict if the response is valid, ``None`` otherwise.
            :rtype: dict
            :raises requests.exceptions.RequestException: on any connection error.
        """
        (body, charset) = self.get_service_response_body()
        return self.parse_response(body, charset)

    def parse_response(self, body, charset=None):
        """
            :param body: A CAS server response
            :param unicode charset: The charset announced by the CAS server, if any
            :return: A user information dict if ``body`` is a successful response,
                ``None`` otherwise.
            :rtype: dict
        """
        lookup = self.parser.find_authentication_success(body, charset)
        if not lookup.found:
            logger.info("Ticket validation failed (%s) on %s" % (lookup.outcome, self.url))
            return None
        user_info = self.parser.parse_user_info(lookup.node)
        if not user_info:
            logger.info("Empty authentication success on %s" % self.url)
            return None
        logger.info("Ticket validated on %s" % self.url)
        return user_info

    def get_service_response_body(self):
        """
            retrieves the response of the CAS server

            :return: The tuple (raw response body, announced charset or ``None``)
            :rtype: tuple
        """
        verify = self.options.get_ssl_verify()
        if verify is False:
            logger.warning("TLS certificate verification disabled for %s" % self.url)
        logger.debug("Validating ticket with %s" % self.url)
        response = requests.get(
            self.url,
            headers=dict(self.VALIDATION_REQUEST_HEADERS),
            verify=verify
        )
        try:
            return (response.content, self.get_page_charset(response))
        finally:
            response.close()
