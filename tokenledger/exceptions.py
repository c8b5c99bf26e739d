class LedgerError(Exception):
    """
    The base exception for the ledger. The fmt directive
    will be overloaded by the inheriting classes. The formatted
    message is the literal reason string surfaced to callers.

    :ivar reason: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs
        self.reason = msg


class ZeroRecipient(LedgerError):
    fmt = 'ZeroRecipient'


class ZeroSource(LedgerError):
    fmt = 'ZeroSource'


class ZeroAddressQuery(LedgerError):
    """
    Balance of the zero address was requested. The zero address
    never holds anything, so asking for it is an error rather than zero.
    """
    fmt = 'ZeroAddressQuery'


class Unauthorized(LedgerError):
    """
    :ivar caller: The account that attempted to move the balance
    :ivar holder: The account whose balance would have moved
    """
    fmt = 'Unauthorized'


class NotOwner(LedgerError):
    fmt = 'NotOwner'


class SelfApproval(LedgerError):
    fmt = 'SelfApproval'


class LengthMismatch(LedgerError):
    fmt = 'LengthMismatch'


class InsufficientBalance(LedgerError):
    """
    :ivar asset: The asset id being debited
    :ivar holder: The account being debited
    :ivar balance: The balance available
    :ivar amount: The amount requested
    """
    fmt = 'InsufficientBalance'


class BurnExceedsBalance(LedgerError):
    fmt = 'BurnExceedsBalance'


class BalanceOverflow(LedgerError):
    fmt = 'BalanceOverflow'


class InvalidAmount(LedgerError):
    fmt = 'InvalidAmount'


class InvalidAssetId(LedgerError):
    fmt = 'InvalidAssetId'


class NonexistentAsset(LedgerError):
    fmt = 'NonexistentAsset'


class RejectedBySelector(LedgerError):
    """
    The receipt hook returned, but not with the expected selector

    :ivar expected: The selector constant for the hook variant
    :ivar returned: What the receiver handed back
    """
    fmt = 'RejectedBySelector'


class ReceiverRejected(LedgerError):
    """
    The receipt hook reverted with a reason. The reason is
    propagated verbatim as the message.
    """
    fmt = '{reason}'


class NotAnERC1155Receiver(LedgerError):
    fmt = 'NotAnERC1155Receiver'


class CalleePanicked(LedgerError):
    fmt = 'CalleePanicked'


class UnclassifiedOutcome(LedgerError):
    fmt = "UnclassifiedOutcome: '{outcome}'"


class AlreadyInitialized(LedgerError):
    fmt = 'AlreadyInitialized'


class NotInitialized(LedgerError):
    fmt = 'NotInitialized'


class PrivateMethod(LedgerError):
    fmt = "Private method '{name}' not callable"


class UnknownMethod(LedgerError):
    fmt = "Unknown method '{name}'"


class ReentrantCall(LedgerError):
    fmt = "Reentrant call to '{name}' while another operation is running"
