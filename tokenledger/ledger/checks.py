from tokenledger import config
from tokenledger.exceptions import InvalidAmount, InvalidAssetId, LengthMismatch


def is_zero(address):
    return address is None or address == config.ZERO_ADDRESS


def _is_uint256(value):
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= config.MAX_UINT256


def require_amount(amount):
    if not _is_uint256(amount):
        raise InvalidAmount(amount=amount)
    return amount


def require_asset_id(asset):
    if not _is_uint256(asset):
        raise InvalidAssetId(asset=asset)
    return asset


def require_pairs(assets, amounts):
    if len(assets) != len(amounts):
        raise LengthMismatch(left=len(assets), right=len(amounts))

    for asset, amount in zip(assets, amounts):
        require_asset_id(asset)
        require_amount(amount)

    return list(zip(assets, amounts))
