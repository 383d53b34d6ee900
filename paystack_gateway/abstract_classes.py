from abc import ABC, abstractmethod


class AbstractPayloadSource(ABC):
    """
    Abstract class for payload sources

    *** A payload source supplies default values for operations that were
    *** called without an explicit payload, e.g. the fields of a posted form.

    """

    @abstractmethod
    def get(self, key, default=None):
        pass

    @abstractmethod
    def has(self, key):
        pass


class AbstractTransactionClient(ABC):
    """
    Abstract class for transaction operations:

    *** This class handles initialization, verification, listing and export
    *** of transactions.

    """

    @abstractmethod
    def initialize_transaction(self, data=None):
        pass

    @abstractmethod
    def verify_transaction(self, reference=None):
        pass

    @abstractmethod
    def is_transaction_verification_valid(self, reference=None):
        pass

    @abstractmethod
    def list_transactions(self):
        pass

    @abstractmethod
    def export_transactions(self, data=None):
        pass


class AbstractCustomerClient(ABC):
    """
    Abstract class for customers

    *** this abstract class serves as a blueprint for
    *** customer management providing methods for CRUD operations.

    """

    @abstractmethod
    def create_customer(self, data=None):
        pass

    @abstractmethod
    def fetch_customer(self, customer_id):
        pass

    @abstractmethod
    def list_customers(self):
        pass

    @abstractmethod
    def update_customer(self, customer_id, data=None):
        pass


class AbstractPlanClient(ABC):

    @abstractmethod
    def create_plan(self, data=None):
        pass

    @abstractmethod
    def fetch_plan(self, plan_code):
        pass

    @abstractmethod
    def list_plans(self):
        pass

    @abstractmethod
    def update_plan(self, plan_code, data=None):
        pass


class AbstractSubscriptionClient(ABC):
    """
    Abstract class for recurring payments:

    *** Subscriptions tie a customer to a plan, they can be
    *** enabled and disabled but never updated in place.

    """

    @abstractmethod
    def create_subscription(self, data=None):
        pass

    @abstractmethod
    def fetch_subscription(self, subscription_id):
        pass

    @abstractmethod
    def list_subscriptions(self):
        pass

    @abstractmethod
    def enable_subscription(self, data=None):
        pass

    @abstractmethod
    def disable_subscription(self, data=None):
        pass


class AbstractPageClient(ABC):

    @abstractmethod
    def create_page(self, data=None):
        pass

    @abstractmethod
    def fetch_page(self, page_id):
        pass

    @abstractmethod
    def list_pages(self):
        pass

    @abstractmethod
    def update_page(self, page_id, data=None):
        pass


class AbstractSubAccountClient(ABC):
    """
    Abstract class for subaccounts used in split payments
    """

    @abstractmethod
    def create_sub_account(self, data=None):
        pass

    @abstractmethod
    def fetch_sub_account(self, subaccount_code):
        pass

    @abstractmethod
    def list_sub_accounts(self, per_page, page):
        pass

    @abstractmethod
    def update_sub_account(self, subaccount_code, data=None):
        pass


class AbstractBankClient(ABC):

    @abstractmethod
    def get_banks(self, country=None, per_page=50, use_cursor=False):
        pass

    @abstractmethod
    def confirm_account(self, account_number, bank_code):
        pass


class AbstractTransfer(ABC):
    """
    Abstract class for transfer operations:

    *** Transfers move money from the balance to a previously
    *** created transfer recipient, optionally finalized with an otp.

    """

    @abstractmethod
    def create_transfer_recipient(self, data=None):
        pass

    @abstractmethod
    def retrieve_transfer_recipient(self, recipient_code):
        pass

    @abstractmethod
    def get_transfer_recipients(self):
        pass

    @abstractmethod
    def make_transfer(self, data=None):
        pass

    @abstractmethod
    def retrieve_transfer(self):
        pass

    @abstractmethod
    def finalize_transfer(self, data=None):
        pass

    @abstractmethod
    def verify_transfer(self, reference):
        pass
