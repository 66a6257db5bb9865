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
"""Some util function for the app"""
from urllib.parse import urlparse, urlunparse, parse_qsl, urlencode


def to_unicode(data, charset="utf-8"):
    """make `data` a unicode if `data` is a unicode or bytes encoded with `charset`"""
    if isinstance(data, bytes):
        return data.decode(charset)
    else:
        return data


def to_bytes(data, charset="utf-8"):
    """
        make `data` a bytes encoded with `charset` if `data` is a unicode
        or bytes encoded with `charset`
    """
    if isinstance(data, str):
        return data.encode(charset)
    else:
        return data


def _rebuild_url(url, update):
    """
        Apply ``update`` to the query of ``url``

        :param unicode url: An URL possibily with a querystring
        :param update: A function taking the querystring as a :obj:`dict` and modifying it in place
        :return: The URL with a sorted querystring
        :rtype: unicode
    """
    url_parts = list(urlparse(to_unicode(url)))
    query = dict(parse_qsl(url_parts[4], keep_blank_values=True))
    update(query)
    # make the params order deterministic
    url_parts[4] = urlencode(sorted(query.items()))
    return urlunparse(url_parts)


def update_url(url, params):
    """
        update parameters using ``params`` in the ``url`` query string

        :param url: An URL possibily with a querystring
        :type url: :obj:`unicode` or :obj:`str`
        :param dict params: A dictionary of parameters for updating the url querystring
        :return: The URL with an updated querystring
        :rtype: unicode
    """
    params = {to_unicode(key): to_unicode(value) for (key, value) in params.items()}
    return _rebuild_url(url, lambda query: query.update(params))


def remove_url_params(url, names):
    """
        remove the parameters listed in ``names`` from the ``url`` query string

        :param url: An URL possibily with a querystring
        :type url: :obj:`unicode` or :obj:`str`
        :param set names: The names of the parameters to drop
        :return: The URL without the parameters from ``names``
        :rtype: unicode
    """
    def drop(query):
        for name in names:
            query.pop(name, None)
    return _rebuild_url(url, drop)
