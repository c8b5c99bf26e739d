from tokenledger import config
from tokenledger.exceptions import ZeroRecipient, ZeroSource, Unauthorized, BurnExceedsBalance
from tokenledger.ledger.balances import BalanceLedger
from tokenledger.ledger.approvals import ApprovalRegistry
from tokenledger.ledger.acceptance import AcceptanceProtocol
from tokenledger.ledger.checks import is_zero, require_amount, require_asset_id, require_pairs
from tokenledger.ledger.events import TransferSingle, TransferBatch


class TransferEngine:
    """
    Moves, creates and destroys balances.

    Every check runs before the first write, so a failing call leaves the
    balances as they were. The receipt hook runs last, after the balances
    have moved and the transfer has been announced. If it refuses, the
    error propagates and the executor discards the whole operation.
    """
    def __init__(self, balances: BalanceLedger, approvals: ApprovalRegistry, acceptance: AcceptanceProtocol, events):
        self.balances = balances
        self.approvals = approvals
        self.acceptance = acceptance
        self.events = events

    def authorize(self, caller, from_):
        if caller == from_ or self.approvals.is_approved_for_all(from_, caller):
            return
        raise Unauthorized(caller=caller, holder=from_)

    def transfer(self, caller, from_, to, asset, amount, data=b''):
        if is_zero(to):
            raise ZeroRecipient()

        self.authorize(caller, from_)

        require_asset_id(asset)
        require_amount(amount)

        self.balances.check_debits(from_, [(asset, amount)])
        if from_ != to:
            self.balances.check_credits(to, [(asset, amount)])

        self.balances.decrease(asset, from_, amount)
        self.balances.increase(asset, to, amount)

        self.events.announce(TransferSingle(operator=caller, from_=from_, to=to, asset=asset, amount=amount))

        self.acceptance.check(caller, from_, to, asset, amount, data)

    def transfer_batch(self, caller, from_, to, assets, amounts, data=b''):
        if is_zero(to):
            raise ZeroRecipient()

        self.authorize(caller, from_)

        pairs = require_pairs(assets, amounts)

        self.balances.check_debits(from_, pairs)
        if from_ != to:
            self.balances.check_credits(to, pairs)

        for asset, amount in pairs:
            self.balances.decrease(asset, from_, amount)
            self.balances.increase(asset, to, amount)

        self.events.announce(TransferBatch(operator=caller, from_=from_, to=to,
                                           assets=list(assets), amounts=list(amounts)))

        self.acceptance.check_batch(caller, from_, to, assets, amounts, data)

    def mint(self, caller, to, asset, amount, data=b''):
        # Minting never consults the receipt hook
        if is_zero(to):
            raise ZeroRecipient()

        require_asset_id(asset)
        require_amount(amount)

        self.balances.increase(asset, to, amount)

        self.events.announce(TransferSingle(operator=caller, from_=config.ZERO_ADDRESS, to=to,
                                            asset=asset, amount=amount))

    def mint_batch(self, caller, to, assets, amounts, data=b''):
        if is_zero(to):
            raise ZeroRecipient()

        pairs = require_pairs(assets, amounts)

        self.balances.check_credits(to, pairs)

        for asset, amount in pairs:
            self.balances.increase(asset, to, amount)

        self.events.announce(TransferBatch(operator=caller, from_=config.ZERO_ADDRESS, to=to,
                                           assets=list(assets), amounts=list(amounts)))

    def burn(self, caller, owner, asset, amount):
        if is_zero(owner):
            raise ZeroSource()

        require_asset_id(asset)
        require_amount(amount)

        self.balances.decrease(asset, owner, amount, error=BurnExceedsBalance)

        self.events.announce(TransferSingle(operator=caller, from_=owner, to=config.ZERO_ADDRESS,
                                            asset=asset, amount=amount))

    def burn_batch(self, caller, owner, assets, amounts):
        if is_zero(owner):
            raise ZeroSource()

        pairs = require_pairs(assets, amounts)

        self.balances.check_debits(owner, pairs, error=BurnExceedsBalance)

        for asset, amount in pairs:
            self.balances.decrease(asset, owner, amount, error=BurnExceedsBalance)

        self.events.announce(TransferBatch(operator=caller, from_=owner, to=config.ZERO_ADDRESS,
                                           assets=list(assets), amounts=list(amounts)))
