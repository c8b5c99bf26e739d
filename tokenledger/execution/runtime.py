from tokenledger import config

RECURSION_LIMIT = 1024


class Context:
    def __init__(self, base_state, maxlen=RECURSION_LIMIT):
        self._state = []
        self._base_state = base_state
        self._maxlen = maxlen

    def _context_changed(self, name):
        if self._get_state()['this'] == name:
            return False
        return True

    def _get_state(self):
        if len(self._state) == 0:
            return self._base_state
        return self._state[-1]

    def _add_state(self, state: dict):
        if self._context_changed(state['this']) and len(self._state) < self._maxlen:
            self._state.append(state)
            return True
        return False

    def _pop_state(self):
        if len(self._state) > 0:
            self._state.pop(-1)

    def _reset(self):
        self._state = []

    @property
    def this(self):
        return self._get_state()['this']

    @property
    def caller(self):
        return self._get_state()['caller']

    @property
    def signer(self):
        return self._get_state()['signer']

    @property
    def owner(self):
        return self._get_state()['owner']


def empty_context():
    return Context({
        'this': None,
        'caller': None,
        'owner': None,
        'signer': None
    })


class Runtime:
    def __init__(self, context=None):
        self.context = context or empty_context()
        self.env = {}
        self.running = False

    def set_up(self, sender, owner, name=config.LEDGER_NAME):
        self.context._reset()
        self.context._base_state = {
            'signer': sender,
            'caller': sender,
            'this': name,
            'owner': owner
        }
        self.running = True

    def clean_up(self):
        self.context._reset()
        self.context._base_state = empty_context()._base_state
        self.env = {}
        self.running = False
