import threading
import traceback
from copy import deepcopy

from tokenledger import config
from tokenledger.exceptions import PrivateMethod, UnknownMethod, ReentrantCall
from tokenledger.execution.runtime import Runtime
from tokenledger.logger import get_logger

log = get_logger('Executor')


class Executor:
    """
    Runs ledger operations one at a time. An operation either commits all
    of its writes and announcements, or none of them: any exception raised
    while it runs discards everything it did.
    """
    def __init__(self, ledger, driver=None, events=None, runtime=None):
        self.ledger = ledger
        self.driver = driver or ledger.driver
        self.events = events or ledger.events
        self.runtime = runtime or Runtime(context=ledger.context)

        self._lock = threading.Lock()
        self._active_thread = None

    def _resolve(self, function_name):
        if function_name.startswith(config.PRIVATE_METHOD_PREFIX):
            raise PrivateMethod(name=function_name)

        func = getattr(self.ledger, function_name, None)
        if func is None or not getattr(func, config.EXPORT_ATTRIBUTE, False):
            raise UnknownMethod(name=function_name)

        return func

    def abort(self):
        self.driver.clear_pending_state()
        self.events.rollback()

    def commit(self):
        self.driver.commit()
        return self.events.commit()

    def execute(self, sender, function_name, kwargs, environment={}, auto_commit=True) -> dict:
        # A receiver hook calling back into the ledger would otherwise deadlock on the lock
        if self._active_thread == threading.get_ident():
            raise ReentrantCall(name=function_name)

        with self._lock:
            self._active_thread = threading.get_ident()
            try:
                return self._execute(sender, function_name, kwargs, environment, auto_commit)
            finally:
                self._active_thread = None

    def _execute(self, sender, function_name, kwargs, environment, auto_commit):
        self.runtime.set_up(sender=sender, owner=self.driver.get_owner(self.ledger.name), name=self.ledger.name)
        self.runtime.env.update(environment)

        try:
            func = self._resolve(function_name)
            result = func(**kwargs)
            status_code = 0
        except Exception as e:
            result = e
            status_code = 1
            log.error('{} from {} aborted: {}'.format(function_name, sender, e))
            log.debug(traceback.format_exc())

        writes = deepcopy(self.driver.pending_writes)
        events = list(self.events.pending)

        if status_code == 1:
            self.abort()
            writes = {}
            events = []
        elif auto_commit:
            self.commit()

        self.runtime.clean_up()

        output = {
            'status_code': status_code,
            'result': result,
            'writes': writes,
            'events': events,
        }

        return output
