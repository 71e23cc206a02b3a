"""Domain exceptions shared by the plans and jobs domains"""


class PlanNotFoundError(Exception):
    """Raised when a service plan id does not exist"""

    def __init__(self, plan_id: int):
        self.plan_id = plan_id
        super().__init__(f"Service plan not found: {plan_id}")


class DuplicateJobError(Exception):
    """A job for this (service plan, scheduled start) pair already exists"""

    def __init__(self, plan_id: int, scheduled_start):
        self.plan_id = plan_id
        self.scheduled_start = scheduled_start
        super().__init__(f"Job already exists for plan {plan_id} at {scheduled_start}")
