from tokenledger.db.orm import Variable, Hash
from tokenledger import config
from tokenledger.exceptions import NonexistentAsset, ZeroRecipient
from tokenledger.ledger.checks import require_amount, require_asset_id, is_zero
from tokenledger.ledger.events import AssetCreated, MetadataAssigned

COMPONENT = 'identity'


class IdentitySet:
    """
    Creator and creation-time supply per asset id, plus the sequence
    that hands out new ids. The recorded supply is a static label set
    once at creation. Later mints and burns move balances, not this figure.
    """
    def __init__(self, driver, events):
        self.events = events
        self.sequence = Variable(COMPONENT, config.SEQUENCE_KEY, driver=driver, default_value=0)
        self.creators = Hash(COMPONENT, 'creators', driver=driver, default_value=config.ZERO_ADDRESS)
        self.supplies = Hash(COMPONENT, 'supplies', driver=driver, default_value=0)

    def create(self, creator, initial_supply, label=''):
        if is_zero(creator):
            raise ZeroRecipient()

        require_amount(initial_supply)

        asset = self.sequence.get() + 1
        self.sequence.set(asset)

        self.creators[asset] = creator
        self.supplies[asset] = initial_supply

        self.events.announce(AssetCreated(asset=asset, creator=creator, supply=initial_supply))

        if label:
            self.events.announce(MetadataAssigned(asset=asset, label=label))

        return asset

    def exists(self, asset):
        require_asset_id(asset)
        return not is_zero(self.creators[asset])

    def creator_of(self, asset):
        require_asset_id(asset)
        return self.creators[asset]

    def supply_of(self, asset):
        require_asset_id(asset)
        return self.supplies[asset]

    def last_id(self):
        return self.sequence.get()

    def record(self, asset):
        if not self.exists(asset):
            raise NonexistentAsset(asset=asset)

        return {
            'creator': self.creators[asset],
            'total_supply': self.supplies[asset]
        }
