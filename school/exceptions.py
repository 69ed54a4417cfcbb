class SchoolError(Exception):
    pass


class EntityNotFoundError(SchoolError):
    def __init__(self, entity, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} does not exist")


class InvalidPatchError(SchoolError):
    pass
