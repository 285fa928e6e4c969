STATS_UNAUTHORIZED = 'STATS_UNAUTHORIZED'
STATS_SUCCESS = 'STATS_SUCCESS'
