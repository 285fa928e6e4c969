MISSING_SHORTCODE = 'MISSING_SHORTCODE'
LINK_NOT_FOUND = 'LINK_NOT_FOUND'
LINK_DELETED = 'LINK_DELETED'
