MISSING_SHORTCODE = 'MISSING_SHORTCODE'
LINK_NOT_FOUND = 'LINK_NOT_FOUND'
LINK_EXPIRED = 'LINK_EXPIRED'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
RAW_CONTENT_SUCCESS = 'RAW_CONTENT_SUCCESS'
FORMATTED_CONTENT_SUCCESS = 'FORMATTED_CONTENT_SUCCESS'
