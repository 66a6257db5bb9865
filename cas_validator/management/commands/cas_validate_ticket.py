"""Command validating a service ticket against the configured CAS server"""
import json

from django.core.management.base import BaseCommand, CommandError
from django.utils.translation import gettext_lazy as _

from ...strategy import CASOptions, CASStrategy
from ...validator import ServiceTicketValidator


class Command(BaseCommand):
    help = _(u"Validate a service ticket and print the returned user attributes")

    def add_arguments(self, parser):
        parser.add_argument('service', help=_(u"the service URL the ticket was issued for"))
        parser.add_argument('ticket', help=_(u"the service ticket to validate"))
        parser.add_argument('--server-url', help=_(u"override CAS_SERVER_URL"))
        parser.add_argument('--cas-version', help=_(u"override CAS_VERSION"))
        parser.add_argument(
            '--no-verify-ssl',
            action='store_true',
            default=None,
            help=_(u"do not check the CAS server TLS certificate")
        )
        parser.add_argument('--ca-path', help=_(u"override CAS_CA_PATH"))

    def handle(self, *args, **options):
        cas_options = CASOptions.from_settings(
            server_url=options['server_url'],
            cas_version=options['cas_version'],
            disable_ssl_verification=options['no_verify_ssl'],
            ca_path=options['ca_path'],
        )
        validator = ServiceTicketValidator(
            CASStrategy(cas_options),
            cas_options,
            options['service'],
            options['ticket']
        )
        user_info = validator.fetch_user_info()
        if user_info is None:
            raise CommandError(_(u"Ticket not validated"))
        self.stdout.write(json.dumps(user_info, indent=4, sort_keys=True))
