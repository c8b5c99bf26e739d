from functools import partial
import inspect

from tokenledger import config
from tokenledger.db.driver import LedgerDriver
from tokenledger.db.orm import Hash
from tokenledger.execution.executor import Executor
from tokenledger.execution.runtime import empty_context
from tokenledger.ledger.acceptance import ReceiverRegistry
from tokenledger.ledger.events import EventLog
from tokenledger.ledger.token import MultiToken
from tokenledger.logger import get_logger

log = get_logger('Client')


class AbstractLedger:
    def __init__(self, name, signer, environment, executor: Executor, funcs):
        self.name = name
        self.signer = signer
        self.environment = environment
        self.executor = executor
        self.functions = funcs

        # set up virtual functions
        for func in funcs:
            # each function is a partial that allows kwarg overloading and overriding
            setattr(self, func, partial(self._abstract_function_call,
                                        signer=self.signer,
                                        executor=self.executor,
                                        func=func,
                                        environment=self.environment))

    def _abstract_function_call(self, signer, executor, func, environment, **kwargs):
        output = executor.execute(sender=signer,
                                  function_name=func,
                                  kwargs=kwargs,
                                  environment=environment)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']


class LedgerClient:
    def __init__(self, signer='sys', driver=None, owner=None, environment={}):
        self.raw_driver = driver or LedgerDriver()
        self.signer = signer
        self.environment = environment

        self.events = EventLog()
        self.receivers = ReceiverRegistry()
        self.ledger = MultiToken(driver=self.raw_driver,
                                 context=empty_context(),
                                 events=self.events,
                                 receivers=self.receivers)

        self.executor = Executor(self.ledger, driver=self.raw_driver, events=self.events)

        self.initialize(owner or signer)

    def initialize(self, owner):
        # Existing state keeps its owner
        if self.ledger.initialized:
            return

        self.ledger.initialize(owner)
        self.raw_driver.commit()
        log.debug('Ledger initialized with owner {}'.format(owner))

    def flush(self, owner=None):
        # flushes db and initializes a fresh ledger
        self.raw_driver.flush()
        self.events.clear()
        self.initialize(owner or self.signer)

    def exported_functions(self):
        funcs = []
        for name, member in inspect.getmembers(type(self.ledger), inspect.isfunction):
            if getattr(member, config.EXPORT_ATTRIBUTE, False):
                funcs.append(name)
        return funcs

    # Returns abstract ledger which has partial methods mapped to each exported function.
    def get_ledger(self, signer=None):
        return AbstractLedger(name=self.ledger.name,
                              signer=signer or self.signer,
                              environment=self.environment,
                              executor=self.executor,
                              funcs=self.exported_functions())

    def deploy_receiver(self, address, receiver):
        self.receivers.deploy(address, receiver)

    def issue(self, initial_holder, initial_supply, label='', creator=None, signer=None):
        """
        Creates an asset class and mints its initial supply. These are two
        separate operations: if the mint fails, the asset stays created
        with nothing minted, and the error is raised.
        """
        ledger = self.get_ledger(signer=signer)

        asset = ledger.create_asset(creator=creator or ledger.signer, initial_supply=initial_supply, label=label)
        ledger.mint(to=initial_holder, asset=asset, amount=initial_supply)

        return asset

    def quick_read(self, component, variable, *args, default_value=None):
        h = Hash(component, variable, driver=self.raw_driver, default_value=default_value)
        if args:
            return h[args if len(args) > 1 else args[0]]
        return self.raw_driver.get_var(component, variable)

    def get_var(self, component, variable, arguments=[]):
        return self.raw_driver.get_var(component, variable, arguments)
