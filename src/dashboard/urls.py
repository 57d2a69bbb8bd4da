GET_DASHBOARD_STATS_URL = "/api/v1/dashboard/stats"
GET_ATTENDANCE_OVER_TIME_URL = "/api/v1/dashboard/attendance-over-time"
