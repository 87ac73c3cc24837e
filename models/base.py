from sqlalchemy.orm import declarative_base
import enum

Base = declarative_base()


# ============================================================================
# ENUMS
# ============================================================================

class Role(str, enum.Enum):
    """User roles"""
    ADMIN = "admin"
    ADS_SPECIALIST = "ads_specialist"
    SOCIAL_MEDIA_SPECIALIST = "social_media_specialist"


class Category(str, enum.Enum):
    """Channel grouping"""
    ORGANIC = "Organik"
    PAID_ADS = "Paid Ads"


class Channel(str, enum.Enum):
    """Marketing platforms"""
    META_ADS = "Meta Ads"
    GOOGLE_ADS = "Google Ads"
    TIKTOK_ADS = "Tiktok Ads"
    FACEBOOK = "Facebook"
    INSTAGRAM = "Instagram"
    WEBSITE = "Website"
    TIKTOK = "Tiktok"
    YOUTUBE = "Youtube"


class Objective(str, enum.Enum):
    """Funnel stage a record was logged against"""
    AWARENESS = "Awareness"
    CONSIDERATION = "Consideration"
    CONVERSION = "Conversion"


class TaskStatus(str, enum.Enum):
    """Task board columns, in workflow order"""
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class View(str, enum.Enum):
    """Top-level dashboard sections"""
    DASHBOARD = "dashboard"
    DATA = "data"
    TASK = "task"
    MANAGEMENT = "management"


class MetricField(str, enum.Enum):
    """Every metric field name used by at least one channel"""
    START_DATE = "Tanggal Mulai"
    END_DATE = "Tanggal Berakhir"
    SPEND = "Spend"
    BUDGET = "Budget"
    REACH = "Jangkauan"
    IMPRESSIONS = "Impresi"
    CPM = "CPM"
    LINK_CLICKS = "Klik Tautan"
    LINK_CTR = "CTR Tautan"
    LINK_CPC = "CPC Tautan"
    CLICKS = "Klik"
    CPC = "CPC"
    CTR = "CTR"
    LEADS = "Leads"
    CLOSING = "Closing"
    CPR = "CPR"
    REVENUE = "Revenue"
    ROAS = "ROAS"
    NOTED = "Noted"
    FOLLOWERS = "Followers"
    VIDEO = "Video"
    REELS = "Reels"
    IMAGES = "Gambar"
    CAROUSEL = "Carousel"
    CONTENT = "Konten"
    PLAYS = "Tayangan"
    LIKES = "Suka"
    COMMENTS = "Komentar"
    SHARES = "Dibagikan"
    FOLLOWING = "Mengikuti"
    SAVES = "Disimpan"
    INTERACTIONS = "Interaksi"
    TOTAL_ENGAGEMENT = "Total Engagement"
    SUBSCRIBERS = "Subscribers"
    VIDEOS = "Videos"
    SHORTS = "Shorts"
    VIEWS = "Views"
    WATCH_TIME = "Watch Time"
    ENGAGEMENT = "Engagement"
    SESSIONS = "Sessions"
    USERS = "Users"
    PAGEVIEWS = "Pageviews"
    BOUNCE_RATE = "Bounce Rate"
