import logging

import requests
from django.core.exceptions import ImproperlyConfigured
from django.shortcuts import redirect
from rest_framework.exceptions import ValidationError

from . import conf, endpoints, utils
from .abstract_classes import (
    AbstractTransactionClient, AbstractCustomerClient, AbstractPlanClient,
    AbstractSubscriptionClient, AbstractPageClient, AbstractSubAccountClient,
    AbstractBankClient, AbstractTransfer
)
from .exceptions import (
    AuthorizationUrlMissing, PaymentVerificationFailed, ResponseNotAvailable
)
from .payload_sources import EmptyPayloadSource
from .utils import build_default_payload, filter_empty, to_int


logger = logging.getLogger(__name__)

error_logs_prefix = 'Paystack Package error in:'

VERIFICATION_SUCCESSFUL = 'Verification successful'

DEFAULT_CURRENCY = 'NGN'
DEFAULT_BANK_COUNTRY = 'nigeria'

SUB_ACCOUNT_FIELDS = (
    ('business_name', 'business_name'),
    ('settlement_bank', 'settlement_bank'),
    ('account_number', 'account_number'),
    ('percentage_charge', 'percentage_charge'),
    ('primary_contact_email', 'primary_contact_email'),
    ('primary_contact_name', 'primary_contact_name'),
    ('primary_contact_phone', 'primary_contact_phone'),
    ('metadata', 'metadata'),
    ('settlement_schedule', 'settlement_schedule'),
)


class PaystackClient(
    AbstractTransactionClient,
    AbstractCustomerClient,
    AbstractPlanClient,
    AbstractSubscriptionClient,
    AbstractPageClient,
    AbstractSubAccountClient,
    AbstractBankClient,
    AbstractTransfer,
):
    """
    Client for the Paystack API

    *** One instance serves one logical operation or one inbound request:
    *** the last raw response and the authorization url are kept on the
    *** instance, so an instance must not be shared between concurrent callers.
    *** Every operation returns its decoded result directly.

    """

    # payload key <- payload source key, used when no explicit payload is given
    DEFAULT_FIELDS = {
        'initialize_transaction': (
            ('amount', 'amount'),
            ('reference', 'reference'),
            ('email', 'email'),
            ('channels', 'channels'),
            ('plan', 'plan'),
            ('first_name', 'first_name'),
            ('last_name', 'last_name'),
            ('callback_url', 'callback_url'),
            ('currency', 'currency'),
            ('subaccount', 'subaccount'),
            ('transaction_charge', 'transaction_charge'),
            ('split_code', 'split_code'),
            ('split', 'split'),
            ('metadata', 'metadata'),
        ),
        'plan': (
            ('name', 'name'),
            ('description', 'desc'),
            ('amount', 'amount'),
            ('interval', 'interval'),
            ('send_invoices', 'send_invoices'),
            ('send_sms', 'send_sms'),
            ('currency', 'currency'),
        ),
        'customer': (
            ('email', 'email'),
            ('first_name', 'fname'),
            ('last_name', 'lname'),
            ('phone', 'phone'),
            ('metadata', 'additional_info'),
        ),
        'export_transactions': (
            ('from', 'from'),
            ('to', 'to'),
            ('settled', 'settled'),
        ),
        'create_subscription': (
            ('customer', 'customer'),
            ('plan', 'plan'),
            ('authorization', 'authorization_code'),
        ),
        'toggle_subscription': (
            ('code', 'code'),
            ('token', 'token'),
        ),
        'page': (
            ('name', 'name'),
            ('description', 'description'),
            ('amount', 'amount'),
        ),
        'create_sub_account': SUB_ACCOUNT_FIELDS,
        'update_sub_account': SUB_ACCOUNT_FIELDS[:4] + (
            ('description', 'description'),
        ) + SUB_ACCOUNT_FIELDS[4:],
        'create_transfer_recipient': (
            ('type', 'type'),
            ('name', 'name'),
            ('account_number', 'account_number'),
            ('bank_code', 'bank_code'),
        ),
        'finalize_transfer': (
            ('transfer_code', 'transfer_code'),
            ('otp', 'otp'),
        ),
        'make_transfer': (
            ('source', 'source'),
            ('reason', 'reason'),
            ('amount', 'amount'),
            ('recipient', 'recipient'),
        ),
    }

    TRANSFER_RECIPIENT_OPTIONAL_FIELDS = (
        'description', 'currency', 'authorization_code', 'metadata',
    )

    def __init__(
        self,
        secret_key: str = None,
        base_url: str = None,
        payload_source=None,
        session: requests.Session = None,
    ):
        secret_key = secret_key or conf.get_secret_key()
        if not secret_key:
            raise ImproperlyConfigured(
                f'{error_logs_prefix} {type(self).__qualname__} '
                f'PAYSTACK_SECRET_KEY must be defined'
            )
        self._secret_key = secret_key
        self._base_url = (base_url or conf.get_payment_url()).rstrip('/')
        self.payload_source = payload_source or EmptyPayloadSource()
        self.session = session or requests.Session()
        self.headers = {
            'Authorization': f'Bearer {self._secret_key}',
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        self.response = None
        self.authorization_url = None
        self.access_code = None

    @property
    def secret_key(self):
        return self._secret_key

    @property
    def base_url(self):
        return self._base_url

    def _dispatch(
        self, relative_url: str, method: str, body: dict = None, params: dict = None
    ):
        """issues one request against the api and returns the decoded body"""
        if not method:
            raise ImproperlyConfigured(
                f'{error_logs_prefix} {self._dispatch.__qualname__} '
                f'Empty method not allowed'
            )
        method = method.upper()
        url = self._base_url + relative_url
        logger.debug(f'Paystack request: {method} {url}')
        try:
            response = self.session.request(
                method,
                url,
                json=body if body is not None else {},
                params=params,
                headers=self.headers,
            )
            response.raise_for_status()
            self.response = response
            return response.json()
        except requests.RequestException as e:
            logger.error(
                f'{error_logs_prefix} {self._dispatch.__qualname__} '
                f'{method} {relative_url}: {str(e)}'
            )
            raise

    def _default_payload(self, fields_name):
        return build_default_payload(
            self.payload_source, self.DEFAULT_FIELDS[fields_name]
        )

    @staticmethod
    def _require(data, fields, operation):
        missing = [key for key, _ in fields if key not in data]
        if missing:
            raise ValidationError(
                {key: f'{operation} requires {key}' for key in missing}
            )

    def get_response(self):
        """decodes the last response received by this client"""
        if self.response is None:
            raise ResponseNotAvailable(
                f'{error_logs_prefix} {self.get_response.__qualname__} '
                f'no request has been dispatched yet'
            )
        return self.response.json()

    def get_data(self):
        return self.get_response()['data']

    # transactions

    def _initialize_payload(self):
        source = self.payload_source
        payload = self._default_payload('initialize_transaction')
        quantity = to_int(source.get('quantity')) or 1
        payload['amount'] = (to_int(source.get('amount')) or 0) * quantity
        payload['currency'] = source.get('currency') or DEFAULT_CURRENCY
        return filter_empty(payload)

    def initialize_transaction(self, data=None):
        """
        Initiates a payment request, the payload is built from the payload
        source when it is not passed in (e.g. a form posted to a view).
        Returns the client so the result can be read with get_response().
        """
        if data is None:
            data = self._initialize_payload()
        result = self._dispatch(endpoints.TRANSACTION_INITIALIZE, 'POST', data)
        authorization = result.get('data') or {}
        self.authorization_url = authorization.get('authorization_url')
        self.access_code = authorization.get('access_code')
        return self

    make_payment_request = initialize_transaction

    def get_authorization_url(self, data=None):
        return self.initialize_transaction(data)

    def get_authorization_response(self, data=None):
        """for detached frontends that can not be redirected by the backend"""
        return self.initialize_transaction(data).get_response()

    def get_access_code(self):
        return self.get_data()['access_code']

    def redirect_now(self):
        if not self.authorization_url:
            raise AuthorizationUrlMissing(
                f'{error_logs_prefix} {self.redirect_now.__qualname__} '
                f'initialize a transaction before redirecting'
            )
        return redirect(self.authorization_url)

    def verify_transaction(self, reference=None):
        reference = reference or self.payload_source.get('trxref')
        if not reference:
            raise ValidationError(
                {'reference': f'{self.verify_transaction.__qualname__} requires a reference'}
            )
        return self._dispatch(
            f'{endpoints.TRANSACTION_VERIFY}/{reference}', 'GET'
        )

    def is_transaction_verification_valid(self, reference=None):
        result = self.verify_transaction(reference)
        return result.get('message') == VERIFICATION_SUCCESSFUL

    def get_payment_data(self, reference=None):
        result = self.verify_transaction(reference)
        if result.get('message') != VERIFICATION_SUCCESSFUL:
            logger.error(
                f'{error_logs_prefix} {self.get_payment_data.__qualname__} '
                f'{result.get("message")}'
            )
            raise PaymentVerificationFailed()
        return result

    def list_transactions(self):
        return self._dispatch(endpoints.TRANSACTION, 'GET')['data']

    def export_transactions(self, data=None):
        if data is None:
            data = self._default_payload('export_transactions')
        return self._dispatch(endpoints.TRANSACTION_EXPORT, 'GET', data)

    @staticmethod
    def gen_tranx_ref():
        return utils.gen_tranx_ref()

    # customers

    def create_customer(self, data=None):
        if data is None:
            data = self._default_payload('customer')
        return self._dispatch(endpoints.CUSTOMER, 'POST', data)

    def fetch_customer(self, customer_id):
        return self._dispatch(f'{endpoints.CUSTOMER}/{customer_id}', 'GET')

    def list_customers(self):
        return self._dispatch(endpoints.CUSTOMER, 'GET')['data']

    def update_customer(self, customer_id, data=None):
        if data is None:
            data = self._default_payload('customer')
        return self._dispatch(f'{endpoints.CUSTOMER}/{customer_id}', 'PUT', data)

    # plans

    def _plan_payload(self):
        payload = self._default_payload('plan')
        payload['amount'] = to_int(payload['amount'])
        return payload

    def create_plan(self, data=None):
        if data is None:
            data = self._plan_payload()
        return self._dispatch(endpoints.PLAN, 'POST', data)

    def fetch_plan(self, plan_code):
        return self._dispatch(f'{endpoints.PLAN}/{plan_code}', 'GET')

    def list_plans(self):
        return self._dispatch(endpoints.PLAN, 'GET')['data']

    def update_plan(self, plan_code, data=None):
        if data is None:
            data = self._plan_payload()
        return self._dispatch(f'{endpoints.PLAN}/{plan_code}', 'PUT', data)

    # subscriptions

    def create_subscription(self, data=None):
        if data is None:
            data = self._default_payload('create_subscription')
        return self._dispatch(endpoints.SUBSCRIPTION, 'POST', data)

    def fetch_subscription(self, subscription_id):
        return self._dispatch(
            f'{endpoints.SUBSCRIPTION}/{subscription_id}', 'GET'
        )

    def list_subscriptions(self):
        return self._dispatch(endpoints.SUBSCRIPTION, 'GET')['data']

    def list_subscriptions_by_customer(self, customer_id):
        return self._dispatch(
            endpoints.SUBSCRIPTION, 'GET', params={'customer': customer_id}
        )['data']

    def list_subscriptions_by_plan(self, plan_id):
        return self._dispatch(
            endpoints.SUBSCRIPTION, 'GET', params={'plan': plan_id}
        )['data']

    def enable_subscription(self, data=None):
        if data is None:
            data = self._default_payload('toggle_subscription')
        return self._dispatch(endpoints.SUBSCRIPTION_ENABLE, 'POST', data)

    def disable_subscription(self, data=None):
        if data is None:
            data = self._default_payload('toggle_subscription')
        return self._dispatch(endpoints.SUBSCRIPTION_DISABLE, 'POST', data)

    # pages

    def create_page(self, data=None):
        if data is None:
            data = self._default_payload('page')
        return self._dispatch(endpoints.PAGE, 'POST', data)

    def fetch_page(self, page_id):
        return self._dispatch(f'{endpoints.PAGE}/{page_id}', 'GET')

    def list_pages(self):
        return self._dispatch(endpoints.PAGE, 'GET')

    def update_page(self, page_id, data=None):
        if data is None:
            data = self._default_payload('page')
        return self._dispatch(f'{endpoints.PAGE}/{page_id}', 'PUT', data)

    # subaccounts

    def create_sub_account(self, data=None):
        """
        Creates a subaccount for split payments. The api requires
        business_name, settlement_bank, account_number and percentage_charge.
        """
        if data is None:
            data = self._default_payload('create_sub_account')
        return self._dispatch(endpoints.SUBACCOUNT, 'POST', filter_empty(data))

    def fetch_sub_account(self, subaccount_code):
        return self._dispatch(f'{endpoints.SUBACCOUNT}/{subaccount_code}', 'GET')

    def list_sub_accounts(self, per_page, page):
        params = {'perPage': int(per_page), 'page': int(page)}
        return self._dispatch(endpoints.SUBACCOUNT, 'GET', params=params)

    def update_sub_account(self, subaccount_code, data=None):
        if data is None:
            data = self._default_payload('update_sub_account')
        return self._dispatch(
            f'{endpoints.SUBACCOUNT}/{subaccount_code}', 'PUT', filter_empty(data)
        )

    # banks

    def get_banks(self, country=None, per_page=50, use_cursor=False):
        country = country or self.payload_source.get('country') or DEFAULT_BANK_COUNTRY
        params = {
            'country': country,
            'use_cursor': 'true' if use_cursor else 'false',
            'perPage': int(per_page),
        }
        return self._dispatch(endpoints.BANK, 'GET', params=params)

    def confirm_account(self, account_number, bank_code):
        """checks that an account number belongs to the expected customer"""
        params = {
            'account_number': account_number,
            'bank_code': bank_code,
        }
        return self._dispatch(endpoints.BANK_RESOLVE, 'GET', params=params)

    # transfers

    def create_transfer_recipient(self, data=None):
        fields = self.DEFAULT_FIELDS['create_transfer_recipient']
        if data is None:
            data = self._default_payload('create_transfer_recipient')
            for optional in self.TRANSFER_RECIPIENT_OPTIONAL_FIELDS:
                if self.payload_source.has(optional):
                    data[optional] = self.payload_source.get(optional)
        self._require(data, fields, self.create_transfer_recipient.__qualname__)
        return self._dispatch(endpoints.TRANSFER_RECIPIENT, 'POST', data)

    def retrieve_transfer_recipient(self, recipient_code):
        return self._dispatch(
            f'{endpoints.TRANSFER_RECIPIENT}/{recipient_code}', 'GET'
        )

    def get_transfer_recipients(self):
        return self._dispatch(endpoints.TRANSFER_RECIPIENT, 'GET')

    def retrieve_transfer(self):
        return self._dispatch(endpoints.TRANSFER, 'GET')

    def finalize_transfer(self, data=None):
        """completes a transfer that is waiting for otp validation"""
        if data is None:
            data = self._default_payload('finalize_transfer')
        self._require(
            data,
            self.DEFAULT_FIELDS['finalize_transfer'],
            self.finalize_transfer.__qualname__,
        )
        return self._dispatch(endpoints.TRANSFER_FINALIZE, 'POST', data)

    def verify_transfer(self, reference):
        return self._dispatch(
            f'{endpoints.TRANSFER_FINALIZE}/{reference}', 'GET'
        )

    def make_transfer(self, data=None):
        """
        Initiates a transfer, e.g.
        {"source": "balance", "reason": "Refund", "amount": 3794800,
         "recipient": "RCP_gx2wn530m0i3w3m"}
        """
        if data is None:
            data = self._default_payload('make_transfer')
        self._require(
            data,
            self.DEFAULT_FIELDS['make_transfer'],
            self.make_transfer.__qualname__,
        )
        return self._dispatch(endpoints.TRANSFER, 'POST', data)
