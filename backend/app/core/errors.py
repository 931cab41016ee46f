class PeopleAppException(Exception):
    """base exception for people-registry errors"""
    pass


class NotFoundError(PeopleAppException):
    """raised when a requested record does not exist"""
    pass


class PersonNotFoundError(NotFoundError):
    """raised when no person exists for the requested id"""

    def __init__(self, person_id: int):
        self.person_id = person_id
        super().__init__(f"person {person_id} not found")
