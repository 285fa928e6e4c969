INVALID_JSON_BODY = 'INVALID_JSON_BODY'
INVALID_INPUT = 'INVALID_INPUT'
SHORTCODE_TAKEN = 'SHORTCODE_TAKEN'
LINK_CREATED = 'LINK_CREATED'
