INVALID_JSON_BODY = 'INVALID_JSON_BODY'
PASSWORD_REJECTED = 'PASSWORD_REJECTED'
PASSWORD_ACCEPTED = 'PASSWORD_ACCEPTED'
