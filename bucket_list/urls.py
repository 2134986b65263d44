from django.urls import path, include
from rest_framework.routers import DefaultRouter

from bucket_list.views import BucketListItemViewSet

router = DefaultRouter()
router.register(r'items', BucketListItemViewSet, basename='bucket-list-item')

urlpatterns = [
    path('', include(router.urls)),
]
