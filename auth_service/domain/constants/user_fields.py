"""Constants for user and profile field names"""


class UserFields:
    """Field name constants for the ProductUser aggregate"""
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    PROFILE = "profile"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class ProfileFields:
    """Field name constants for the embedded UserProfile document"""
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    PHONE = "phone"
    NATIONAL_ID = "national_id"
    LOCATION = "location"
    AVATAR = "avatar"


class TokenClaims:
    """Claim names carried by issued access tokens"""
    EMAIL = "email"
    USER_ID = "userId"
