GET_GROUP_RSVP_URL = "/api/v1/rsvp/{token}"
UPDATE_RSVP_URL = "/api/v1/rsvp/{token}"
ISSUE_INVITATION_URL = "/api/v1/groups/{group_id}/invitation"
