from tokenledger.db.orm import Hash
from tokenledger.exceptions import SelfApproval
from tokenledger.ledger.events import ApprovalForAll

COMPONENT = 'approvals'


class ApprovalRegistry:
    def __init__(self, driver, events):
        self.events = events
        self.operators = Hash(COMPONENT, 'operators', driver=driver, default_value=False)

    def set_approval_for_all(self, owner, operator, approved):
        if owner == operator:
            raise SelfApproval(owner=owner)

        approved = bool(approved)
        self.operators[owner, operator] = approved

        # Announced even when the value does not change
        self.events.announce(ApprovalForAll(owner=owner, operator=operator, approved=approved))

    def is_approved_for_all(self, owner, operator):
        return self.operators[owner, operator] is True
