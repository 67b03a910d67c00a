"""Authorization schemes from the IANA HTTP Authentication Scheme Registry."""


class Authorization:
    AWS4_HMAC_SHA256 = "AWS4-HMAC-SHA256"
    BASIC = "Basic"
    BEARER = "Bearer"
    DIGEST = "Digest"
    HOBA = "HOBA"
    MUTUAL = "Mutual"
    NEGOTIATE = "Negotiate"
    OAUTH = "OAuth"
    SCRAM_SHA_1 = "SCRAM-SHA-1"
    SCRAM_SHA_256 = "SCRAM-SHA-256"
    VAPID = "vapid"
