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
"""Default values for the app's settings"""
from django.conf import settings


#: URL of the CAS server, for instance ``https://cas.example.com/cas``. Must be set.
CAS_SERVER_URL = None
#: Path of the ticket validation endpoint, relative to :obj:`CAS_SERVER_URL`. An absolute URL
#: is used as is. Set it to ``/validate`` together with :obj:`CAS_VERSION` ``"1.0"`` for
#: legacy CAS 1.0 servers.
CAS_SERVICE_VALIDATE_URL = '/serviceValidate'
#: Version of the CAS protocol spoken by the server. ``"1.0"`` selects the plaintext protocol,
#: any other value the XML based CAS 2.0+ protocol.
CAS_VERSION = '2.0'
#: If ``True``, the TLS certificate of the CAS server is not checked. Never enable it in
#: production.
CAS_DISABLE_SSL_VERIFICATION = False
#: Path to a certificate authorities file or directory used to check the CAS server
#: certificate. ``None`` tell requests to use its internal certificat authorities.
CAS_CA_PATH = None


GLOBALS = globals().copy()
for name, default_value in GLOBALS.items():
    # only care about parameter begining by CAS_
    if name.startswith("CAS_"):
        # get the current setting value, falling back to default_value
        value = getattr(settings, name, default_value)
        # set the setting value to its value if defined, ellse to the default_value.
        setattr(settings, name, value)
