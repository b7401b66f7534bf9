from django.contrib.auth.backends import ModelBackend


class AccountStatusBackend(ModelBackend):
    """Refuses accounts that are still awaiting approval or were rejected.

    Inactive representatives may still sign in; they are only barred from
    submitting new visits.
    """

    def user_can_authenticate(self, user):
        return super().user_can_authenticate(user) and getattr(user, "can_sign_in", False)
