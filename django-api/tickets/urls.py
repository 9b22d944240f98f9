from django.urls import path

from tickets.handlers import PurchaseView

urlpatterns = [
    path(
        "accounts/<str:account_id>/purchases",
        PurchaseView.as_view(),
        name="purchase-create",
    ),
]
