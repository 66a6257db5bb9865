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
"""Tests module for utils"""
from django.test import SimpleTestCase

from cas_validator import utils


class UtilsTestCase(SimpleTestCase):
    """tests for some little utils functions"""

    def test_update_url(self):
        """
            test the update_url function. Given an url with possible GET parameter and a dict
            the function build a url with GET parameters updated by the dictionnary
        """
        url1 = utils.update_url(u"https://www.example.com?toto=1", {u"tata": u"2"})
        url2 = utils.update_url(b"https://www.example.com?toto=1", {b"tata": b"2"})
        self.assertEqual(url1, u"https://www.example.com?tata=2&toto=1")
        self.assertEqual(url2, u"https://www.example.com?tata=2&toto=1")

        url3 = utils.update_url(u"https://www.example.com?toto=1", {u"toto": u"2"})
        self.assertEqual(url3, u"https://www.example.com?toto=2")

    def test_remove_url_params(self):
        """the named parameters are dropped, the other ones kept"""
        self.assertEqual(
            utils.remove_url_params(u"https://www.example.com/?ticket=ST-1&b=2&a=", {u"ticket"}),
            u"https://www.example.com/?a=&b=2"
        )
        self.assertEqual(
            utils.remove_url_params(u"https://www.example.com/path", {u"ticket"}),
            u"https://www.example.com/path"
        )

    def test_to_unicode(self):
        """bytes are decoded, unicode returned unchanged"""
        self.assertEqual(utils.to_unicode(u"dédé".encode("latin1"), "latin1"), u"dédé")
        self.assertEqual(utils.to_unicode(u"dédé"), u"dédé")
        self.assertIsNone(utils.to_unicode(None))

    def test_to_bytes(self):
        """unicode are encoded, bytes returned unchanged"""
        self.assertEqual(utils.to_bytes(u"dédé"), u"dédé".encode("utf-8"))
        self.assertEqual(utils.to_bytes(b"toto"), b"toto")
