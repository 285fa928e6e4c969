LOGOUT_SUCCESS = 'LOGOUT_SUCCESS'
