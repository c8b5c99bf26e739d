from collections import namedtuple

from tokenledger.logger import get_logger

log = get_logger('Events')

TransferSingle = namedtuple('TransferSingle', ['operator', 'from_', 'to', 'asset', 'amount'])
TransferBatch = namedtuple('TransferBatch', ['operator', 'from_', 'to', 'assets', 'amounts'])
ApprovalForAll = namedtuple('ApprovalForAll', ['owner', 'operator', 'approved'])
AssetCreated = namedtuple('AssetCreated', ['asset', 'creator', 'supply'])
MetadataAssigned = namedtuple('MetadataAssigned', ['asset', 'label'])
OwnershipTransferred = namedtuple('OwnershipTransferred', ['previous', 'new'])


class EventLog:
    """
    Announcements made by the ledger. Events are buffered while an
    operation runs and only become visible when the operation commits,
    so an aborted operation leaves no trace here either.
    """
    def __init__(self):
        self.pending = []
        self.history = []
        self.subscribers = []

    def announce(self, event):
        self.pending.append(event)

    def subscribe(self, callback):
        self.subscribers.append(callback)

    def commit(self):
        committed = self.pending
        self.pending = []
        self.history.extend(committed)

        for event in committed:
            for callback in self.subscribers:
                # Sinks are fire-and-forget
                try:
                    callback(event)
                except Exception as e:
                    log.warning('Subscriber {} failed on {}: {}'.format(callback, type(event).__name__, e))

        return committed

    def rollback(self):
        self.pending = []

    def clear(self):
        self.pending = []
        self.history = []
