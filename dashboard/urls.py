from django.urls import path, include
from rest_framework.routers import SimpleRouter

from . import views

router = SimpleRouter()
router.register(r'layout', views.DashboardLayoutViewSet, basename='dashboard-layout')

urlpatterns = [
    path("widgets/catalog/", views.WidgetCatalogView.as_view(), name="widget-catalog"),
    path("", include(router.urls)),
]
