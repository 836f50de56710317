class FieldsListError(Exception):
    pass


class ValidationError(FieldsListError):
    @property
    def message(self):
        return str(self)
