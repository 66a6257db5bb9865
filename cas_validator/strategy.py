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
"""Options and URL building strategy used by the ticket validator"""
from .default_settings import settings

from django.core.exceptions import ImproperlyConfigured

from urllib.parse import urlparse

from .utils import update_url, remove_url_params


class CASOptions:
    """
        Options of a CAS client

        :param unicode server_url: The CAS server base URL
        :param unicode service_validate_url: The ticket validation endpoint, relative to
            ``server_url`` or absolute
        :param unicode cas_version: The CAS protocol version. ``"1.0"`` for the plaintext protocol,
            anything else for the XML CAS 2.0+ protocol.
        :param bool disable_ssl_verification: Skip the CAS server certificate check if ``True``
        :param ca_path: An optional path to a CA bundle file or directory
    """
    #: The legacy plaintext protocol version
    CAS_1 = '1.0'

    def __init__(self, server_url, service_validate_url='/serviceValidate', cas_version='2.0',
                 disable_ssl_verification=False, ca_path=None):
        self.server_url = server_url
        self.service_validate_url = service_validate_url
        self.cas_version = cas_version
        self.disable_ssl_verification = bool(disable_ssl_verification)
        self.ca_path = ca_path

    @classmethod
    def from_settings(cls, **overrides):
        """
            Build the options from the django settings

            :param overrides: options taking precedence over the settings values. ``None``
                values are ignored.
            :return: A new options instance
            :rtype: CASOptions
        """
        params = {
            'server_url': settings.CAS_SERVER_URL,
            'service_validate_url': settings.CAS_SERVICE_VALIDATE_URL,
            'cas_version': settings.CAS_VERSION,
            'disable_ssl_verification': settings.CAS_DISABLE_SSL_VERIFICATION,
            'ca_path': settings.CAS_CA_PATH,
        }
        params.update((key, value) for (key, value) in overrides.items() if value is not None)
        return cls(**params)

    def is_cas_1(self):
        """
            :return: ``True`` if the server speaks the CAS 1.0 protocol
            :rtype: bool
        """
        return self.cas_version == self.CAS_1

    def get_ssl_verify(self):
        """
            :return: The ``verify`` parameter for :func:`requests.get`: ``False`` if the
                verification is disabled, the CA path if any, ``True`` otherwise.
        """
        if self.disable_ssl_verification:
            return False
        if self.ca_path:
            return self.ca_path
        return True

    def __repr__(self):
        return (
            "CASOptions(server_url=%r, service_validate_url=%r, cas_version=%r, "
            "disable_ssl_verification=%r, ca_path=%r)" % (
                self.server_url,
                self.service_validate_url,
                self.cas_version,
                self.disable_ssl_verification,
                self.ca_path,
            )
        )


class CASStrategy:
    """
        Build the CAS server URLs from :class:`CASOptions`

        :param CASOptions options: The options to use. Default to the django settings.
    """
    #: the options of the CAS client
    options = None

    def __init__(self, options=None):
        if options is None:
            options = CASOptions.from_settings()
        self.options = options

    def get_service_validate_endpoint(self):
        """
            :return: The absolute URL of the ticket validation endpoint
            :rtype: unicode
            :raises django.core.exceptions.ImproperlyConfigured: if no CAS server URL is set
                and the endpoint is not an absolute URL
        """
        endpoint = self.options.service_validate_url
        if urlparse(endpoint).scheme:
            return endpoint
        if not self.options.server_url:
            raise ImproperlyConfigured("CAS_SERVER_URL must be set to validate CAS tickets")
        return u"%s/%s" % (self.options.server_url.rstrip('/'), endpoint.lstrip('/'))

    def service_validate_url(self, return_to_url, ticket):
        """
            Compute the URL used to validate ``ticket``

            :param unicode return_to_url: The URL of the service the ticket was issued for. A
                ``ticket`` parameter in its querystring is dropped.
            :param unicode ticket: The service ticket to validate
            :return: The validation URL with the ``service`` and ``ticket`` parameters
            :rtype: unicode
        """
        service = remove_url_params(return_to_url, {'ticket'})
        return update_url(
            self.get_service_validate_endpoint(),
            {'service': service, 'ticket': ticket}
        )
