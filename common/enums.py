from django.db import models


class BaseEnum(models.TextChoices):
    @classmethod
    def choices(cls):
        return [(choice.value, choice.label) for choice in cls]


class BucketListCategory(BaseEnum):
    TRAVEL = 'travel', 'Travel'
    CAREER = 'career', 'Career'
    FITNESS = 'fitness', 'Fitness'
    CREATIVE = 'creative', 'Creative'
    SOCIAL = 'social', 'Social'
    EDUCATION = 'education', 'Education'
    ADVENTURE = 'adventure', 'Adventure'


class IdeaCategory(BaseEnum):
    ROMANTIC = 'romantic', 'Romantic'
    ADVENTURE = 'adventure', 'Adventure'
    CULTURE = 'culture', 'Culture'
    SPORT = 'sport', 'Sport'
    CULINARY = 'culinary', 'Culinary'
    RELAXATION = 'relaxation', 'Relaxation'
    CREATIVE = 'creative', 'Creative'


class CostRange(BaseEnum):
    FREE = 'free', 'Free'
    UNDER_20 = 'under_20', 'Under 20 €'
    FROM_20_TO_50 = '20_50', '20-50 €'
    FROM_50_TO_100 = '50_100', '50-100 €'
    OVER_100 = 'over_100', 'Over 100 €'


class DurationRange(BaseEnum):
    UNDER_1H = 'under_1h', 'Under 1h'
    FROM_1_TO_3H = '1_3h', '1-3h'
    FROM_3_TO_5H = '3_5h', '3-5h'
    HALF_DAY = 'half_day', 'Half a day'
    FULL_DAY = 'full_day', 'Full day'
    WEEKEND = 'weekend', 'Weekend'


class LocationType(BaseEnum):
    INDOOR = 'indoor', 'Indoor'
    OUTDOOR = 'outdoor', 'Outdoor'
    HOME = 'home', 'At home'
    RESTAURANT = 'restaurant', 'Restaurant'
    BAR = 'bar', 'Bar'
    ACTIVITY = 'activity', 'Activity'


class EventCategory(BaseEnum):
    CULTURE = 'culture', 'Culture'
    SPORT = 'sport', 'Sport'
    MUSIC = 'music', 'Music'
    FOOD = 'food', 'Food'
    BUSINESS = 'business', 'Business'
    SOCIAL = 'social', 'Social'


class DistanceBucket(BaseEnum):
    ALL = 'all', 'All distances'
    UNDER_5 = 'under5', 'Under 5 km'
    UNDER_20 = 'under20', 'Under 20 km'
    OVER_20 = 'over20', 'Over 20 km'


class WidgetType(BaseEnum):
    BUCKET_LIST = 'bucket-list', 'Bucket List'
    DATING_JOURNAL = 'dating-journal', 'Dating Journal'
    DATING_IDEAS = 'dating-ideas', 'Dating Ideas'
    DATING_APP = 'dating-app', 'Dating App'


class WidgetSize(BaseEnum):
    SMALL = 'small', 'Small'
    MEDIUM = 'medium', 'Medium'
    LARGE = 'large', 'Large'
