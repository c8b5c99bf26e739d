from tokenledger.db.orm import Hash
from tokenledger import config
from tokenledger.exceptions import InsufficientBalance, BalanceOverflow, ZeroAddressQuery, LengthMismatch
from tokenledger.ledger.checks import is_zero, require_amount, require_asset_id

COMPONENT = 'balances'

INCREASE = 1
DECREASE = -1


class BalanceLedger:
    """
    Balances keyed by (asset, holder). Entries appear on first write and
    are never removed, a zero balance is just a zero balance. Nothing in
    here can go below zero: every decrease is checked before it is applied.
    """
    def __init__(self, driver):
        self.balances = Hash(COMPONENT, 'balances', driver=driver, default_value=0)

    def balance_of(self, asset, holder):
        if is_zero(holder):
            raise ZeroAddressQuery(asset=asset)

        require_asset_id(asset)
        return self.balances[asset, holder]

    def balance_of_batch(self, holders, assets):
        if len(holders) != len(assets):
            raise LengthMismatch(left=len(holders), right=len(assets))

        return [self.balance_of(asset, holder) for holder, asset in zip(holders, assets)]

    def can_cover(self, asset, holder, amount):
        return self.balances[asset, holder] >= amount

    def adjust(self, asset, holder, delta, sign, error=InsufficientBalance):
        require_asset_id(asset)
        require_amount(delta)

        current = self.balances[asset, holder]

        if sign == DECREASE:
            if delta > current:
                raise error(asset=asset, holder=holder, balance=current, amount=delta)
            new = current - delta

        elif sign == INCREASE:
            new = current + delta
            if new > config.MAX_UINT256:
                raise BalanceOverflow(asset=asset, holder=holder, balance=current, amount=delta)

        else:
            raise ValueError('Unknown adjustment sign {}'.format(sign))

        self.balances[asset, holder] = new
        return new

    def increase(self, asset, holder, amount):
        return self.adjust(asset, holder, amount, INCREASE)

    def decrease(self, asset, holder, amount, error=InsufficientBalance):
        return self.adjust(asset, holder, amount, DECREASE, error=error)

    def check_debits(self, holder, pairs, error=InsufficientBalance):
        """
        Checks a whole batch of debits against one holder before any of
        them are applied. Repeated asset ids are summed, so [(1, 5), (1, 5)]
        needs a balance of 10 on asset 1.
        """
        totals = {}
        for asset, amount in pairs:
            totals[asset] = totals.get(asset, 0) + amount

            current = self.balances[asset, holder]
            if totals[asset] > current:
                raise error(asset=asset, holder=holder, balance=current, amount=totals[asset])

    def check_credits(self, holder, pairs):
        totals = {}
        for asset, amount in pairs:
            totals[asset] = totals.get(asset, 0) + amount

            current = self.balances[asset, holder]
            if current + totals[asset] > config.MAX_UINT256:
                raise BalanceOverflow(asset=asset, holder=holder, balance=current, amount=totals[asset])
