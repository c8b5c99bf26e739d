"""
Receipt confirmation for programmatic holders.

A programmatic holder is an address with a receiver deployed at it. Moving
tokens into one only sticks if its hook answers with the right selector.
The hook call is classified into exactly one of four outcomes:

    Ok(value)                -> commit if value is the selector, else RejectedBySelector
    ErrorWithReason(reason)  -> abort with the receiver's reason, verbatim
    ErrorWithoutReason(data) -> abort with NotAnERC1155Receiver
    Panic(error)             -> abort with CalleePanicked

Plain addresses always accept.
"""

from tokenledger import config
from tokenledger.exceptions import RejectedBySelector, ReceiverRejected, NotAnERC1155Receiver, CalleePanicked, \
    UnclassifiedOutcome
from tokenledger.logger import get_logger

log = get_logger('Acceptance')

SINGLE_HOOK = 'on_received'
BATCH_HOOK = 'on_batch_received'


class Revert(Exception):
    """
    Raised by a receiver hook to refuse a transfer. Without a reason
    the refusal is opaque to the ledger.
    """
    def __init__(self, reason=None, data=b''):
        super().__init__(reason or '')
        self.reason = reason
        self.data = data


class Outcome:
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and all(
            getattr(self, s) == getattr(other, s) for s in self.__slots__
        )

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, ', '.join(repr(getattr(self, s)) for s in self.__slots__))


class Ok(Outcome):
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value


class ErrorWithReason(Outcome):
    __slots__ = ('reason',)

    def __init__(self, reason):
        self.reason = reason


class ErrorWithoutReason(Outcome):
    __slots__ = ('data',)

    def __init__(self, data=b''):
        self.data = data


class Panic(Outcome):
    __slots__ = ('error',)

    def __init__(self, error):
        self.error = error


class TokenReceiver:
    """
    Base class for programmatic holders that accept everything. Override
    the hooks to inspect or refuse incoming transfers.
    """
    def on_received(self, operator, from_, asset, amount, data):
        return config.ON_RECEIVED_SELECTOR

    def on_batch_received(self, operator, from_, assets, amounts, data):
        return config.ON_BATCH_RECEIVED_SELECTOR


class ReceiverRegistry:
    def __init__(self):
        self.receivers = {}

    def deploy(self, address, receiver):
        self.receivers[address] = receiver

    def remove(self, address):
        self.receivers.pop(address, None)

    def is_programmatic(self, address):
        return address in self.receivers

    def invoke_receipt_hook(self, target, hook_name, *args):
        receiver = self.receivers[target]

        hook = getattr(receiver, hook_name, None)
        if not callable(hook):
            return ErrorWithoutReason()

        try:
            return Ok(hook(*args))
        except Revert as e:
            if e.reason:
                return ErrorWithReason(str(e.reason))
            return ErrorWithoutReason(e.data)
        except Exception as e:
            return Panic(e)


class AcceptanceProtocol:
    def __init__(self, receivers: ReceiverRegistry, context, name=config.LEDGER_NAME):
        self.receivers = receivers
        self.context = context
        self.name = name

    def check(self, operator, from_, to, asset, amount, data):
        self._run(to, SINGLE_HOOK, config.ON_RECEIVED_SELECTOR, operator, from_, asset, amount, data)

    def check_batch(self, operator, from_, to, assets, amounts, data):
        self._run(to, BATCH_HOOK, config.ON_BATCH_RECEIVED_SELECTOR,
                  operator, from_, list(assets), list(amounts), data)

    def _run(self, to, hook_name, selector, *args):
        if not self.receivers.is_programmatic(to):
            return

        # The receiver sees the ledger as its caller for the duration of the hook
        pushed = self.context._add_state({
            'this': to,
            'caller': self.name,
            'signer': self.context.signer,
            'owner': None
        })

        try:
            outcome = self.receivers.invoke_receipt_hook(to, hook_name, *args)
        finally:
            if pushed:
                self.context._pop_state()

        log.debug('{} on {} classified as {}'.format(hook_name, to, outcome))
        self.resolve(outcome, selector)

    @staticmethod
    def resolve(outcome, selector):
        if isinstance(outcome, Ok):
            if outcome.value != selector:
                raise RejectedBySelector(expected=selector, returned=outcome.value)

        elif isinstance(outcome, ErrorWithReason):
            raise ReceiverRejected(reason=outcome.reason)

        elif isinstance(outcome, ErrorWithoutReason):
            raise NotAnERC1155Receiver(data=outcome.data)

        elif isinstance(outcome, Panic):
            raise CalleePanicked(error=outcome.error)

        else:
            raise UnclassifiedOutcome(outcome=outcome)
