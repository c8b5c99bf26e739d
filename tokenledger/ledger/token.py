from functools import wraps

from tokenledger import config
from tokenledger.db.orm import Variable
from tokenledger.exceptions import AlreadyInitialized, NotInitialized, NotOwner, ZeroRecipient
from tokenledger.ledger.acceptance import AcceptanceProtocol, ReceiverRegistry
from tokenledger.ledger.approvals import ApprovalRegistry
from tokenledger.ledger.balances import BalanceLedger
from tokenledger.ledger.checks import is_zero
from tokenledger.ledger.events import EventLog, OwnershipTransferred
from tokenledger.ledger.identity import IdentitySet
from tokenledger.ledger.transfers import TransferEngine


def export(func):
    """Marks a method as callable through the executor."""
    @wraps(func)
    def _export(self, *args, **kwargs):
        if not self._initialized.get():
            raise NotInitialized()
        return func(self, *args, **kwargs)

    setattr(_export, config.EXPORT_ATTRIBUTE, True)
    return _export


def only_owner(func):
    @wraps(func)
    def _only_owner(self, *args, **kwargs):
        if self.context.caller != self._owner.get():
            raise NotOwner(caller=self.context.caller)
        return func(self, *args, **kwargs)

    return _only_owner


class MultiToken:
    """
    The ledger aggregate. One instance owns every piece of ledger state
    for a deployment and hands the same driver, context and event log to
    each component. The caller of every operation is read from the context.
    """
    def __init__(self, driver, context, events: EventLog, receivers: ReceiverRegistry, name=config.LEDGER_NAME):
        self.name = name
        self.driver = driver
        self.context = context
        self.events = events
        self.receivers = receivers

        self._owner = Variable(name, config.OWNER_KEY, driver=driver)
        self._initialized = Variable(name, config.INITIALIZED_KEY, driver=driver, default_value=False)

        self.identity = IdentitySet(driver, events)
        self.balances = BalanceLedger(driver)
        self.approvals = ApprovalRegistry(driver, events)
        self.acceptance = AcceptanceProtocol(receivers, context, name=name)
        self.engine = TransferEngine(self.balances, self.approvals, self.acceptance, events)

    def initialize(self, owner):
        if self._initialized.get():
            raise AlreadyInitialized()

        self._owner.set(owner)
        self._initialized.set(True)

    @property
    def initialized(self):
        return self._initialized.get()

    # Ownership

    @export
    def owner(self):
        return self._owner.get()

    @export
    @only_owner
    def transfer_ownership(self, new_owner):
        if is_zero(new_owner):
            raise ZeroRecipient()

        previous = self._owner.get()
        self._owner.set(new_owner)
        self.events.announce(OwnershipTransferred(previous=previous, new=new_owner))

    # Queries

    @export
    def balance_of(self, asset, holder):
        return self.balances.balance_of(asset, holder)

    @export
    def balance_of_batch(self, holders, assets):
        return self.balances.balance_of_batch(holders, assets)

    @export
    def is_approved_for_all(self, owner, operator):
        return self.approvals.is_approved_for_all(owner, operator)

    @export
    def exists(self, asset):
        return self.identity.exists(asset)

    @export
    def creator_of(self, asset):
        return self.identity.creator_of(asset)

    @export
    def total_supply(self, asset):
        return self.identity.supply_of(asset)

    @export
    def asset_info(self, asset):
        return self.identity.record(asset)

    # Holder operations

    @export
    def set_approval_for_all(self, operator, approved):
        self.approvals.set_approval_for_all(self.context.caller, operator, approved)

    @export
    def transfer(self, from_, to, asset, amount, data=b''):
        self.engine.transfer(self.context.caller, from_, to, asset, amount, data)

    @export
    def transfer_batch(self, from_, to, assets, amounts, data=b''):
        self.engine.transfer_batch(self.context.caller, from_, to, assets, amounts, data)

    # Authority operations

    @export
    @only_owner
    def create_asset(self, creator, initial_supply, label=''):
        return self.identity.create(creator, initial_supply, label)

    @export
    @only_owner
    def mint(self, to, asset, amount, data=b''):
        self.engine.mint(self.context.caller, to, asset, amount, data)

    @export
    @only_owner
    def mint_batch(self, to, assets, amounts, data=b''):
        self.engine.mint_batch(self.context.caller, to, assets, amounts, data)

    @export
    @only_owner
    def burn(self, owner, asset, amount):
        self.engine.burn(self.context.caller, owner, asset, amount)

    @export
    @only_owner
    def burn_batch(self, owner, assets, amounts):
        self.engine.burn_batch(self.context.caller, owner, assets, amounts)
