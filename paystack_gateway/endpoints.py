"""
Relative paths of the Paystack API, appended to the configured base url.
"""

TRANSACTION = '/transaction'
TRANSACTION_INITIALIZE = '/transaction/initialize'
TRANSACTION_VERIFY = '/transaction/verify'
TRANSACTION_EXPORT = '/transaction/export'

SUBSCRIPTION = '/subscription'
SUBSCRIPTION_ENABLE = '/subscription/enable'
SUBSCRIPTION_DISABLE = '/subscription/disable'

PAGE = '/page'
SUBACCOUNT = '/subaccount'
BANK = '/bank'
BANK_RESOLVE = '/bank/resolve'
PLAN = '/plan'
CUSTOMER = '/customer'

TRANSFER = '/transfer'
TRANSFER_RECIPIENT = '/transferrecipient'
TRANSFER_FINALIZE = '/transfer/finalize_transfer'
