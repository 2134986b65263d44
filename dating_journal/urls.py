from django.urls import path, include
from rest_framework.routers import DefaultRouter

from dating_journal.views import DatingJournalEntryViewSet

router = DefaultRouter()
router.register(r'entries', DatingJournalEntryViewSet, basename='dating-journal-entry')

urlpatterns = [
    path('', include(router.urls)),
]
