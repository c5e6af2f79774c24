from eshift_core.deletion import delete_instance


class PolicedDeleteMixin:
    """Route ``DestroyModelMixin`` deletes through the deletion policy."""

    def perform_destroy(self, instance):
        delete_instance(instance)
