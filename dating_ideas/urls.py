from django.urls import path, include
from rest_framework.routers import DefaultRouter

from dating_ideas.views import DatingIdeaViewSet

router = DefaultRouter()
router.register(r'ideas', DatingIdeaViewSet, basename='dating-idea')

urlpatterns = [
    path('', include(router.urls)),
]
