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
# (c) 2016 Valentin Samir
"""Some utils functions for tests"""
import socket
from http.server import BaseHTTPRequestHandler, HTTPServer
from threading import Thread
from urllib.parse import urlparse, parse_qsl

#: A successful CAS 2.0 response with JASIG style attributes and a proxy chain
SUCCESS_RESPONSE = u"""<cas:serviceResponse xmlns:cas="http://www.yale.edu/tp/cas">
    <cas:authenticationSuccess>
        <cas:user>alice</cas:user>
        <cas:attributes>
            <cas:email>a@b.com</cas:email>
            <cas:displayName>Alice Liddell</cas:displayName>
        </cas:attributes>
        <cas:proxies>
            <cas:proxy>https://proxy1.example.com/pgtUrl</cas:proxy>
        </cas:proxies>
    </cas:authenticationSuccess>
</cas:serviceResponse>
"""

#: A CAS 2.0 failure response
FAILURE_RESPONSE = u"""<cas:serviceResponse xmlns:cas="http://www.yale.edu/tp/cas">
    <cas:authenticationFailure code="INVALID_TICKET">
        Ticket ST-1856339-aA5Yuvrxzpv8Tau1cYQ7 not recognized
    </cas:authenticationFailure>
</cas:serviceResponse>
"""


def free_port():
    """return a local TCP port with nothing listening on it"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


class DummyCAS(BaseHTTPRequestHandler):
    """
        A dummy CAS answering a single GET request with a canned response.
        The request path, parameters and headers are stored on the server.
    """

    def do_GET(self):
        """Called on a GET request on the HTTPServer"""
        url = urlparse(self.path)
        self.server.path = url.path
        self.server.params = dict(parse_qsl(url.query))
        self.server.headers = dict(self.headers)
        self.send_response(self.server.status)
        self.send_header("Content-type", self.server.content_type)
        self.end_headers()
        self.wfile.write(self.server.body)

    def log_message(self, *args):
        """silent any log message"""
        return

    @classmethod
    def run(cls, body, status=200, content_type="text/xml; charset=utf-8", port=0):
        """Run a HTTPServer using this class as handler"""
        httpd = HTTPServer(("127.0.0.1", port), cls)
        httpd.body = body if isinstance(body, bytes) else body.encode("utf-8")
        httpd.status = status
        httpd.content_type = content_type
        httpd.path = None
        httpd.params = None
        httpd.headers = None
        (host, port) = httpd.socket.getsockname()

        def lauch():
            """routine to lauch in a background thread"""
            httpd.handle_request()
            httpd.server_close()

        httpd_thread = Thread(target=lauch)
        httpd_thread.daemon = True
        httpd_thread.start()
        return (httpd, host, port)
