"""
Static command catalog for hcptf.

Every canonical command path the CLI understands, one space-separated
token sequence per entry. The same list builds the routing registry, the
implicit-verb index and the top-level help, so they cannot drift apart.

Entries that are prefixes of other entries (``"stack"`` and
``"stack list"``) are namespace help commands.
"""

COMMAND_PATHS = (
    "account",
    "account create",
    "account show",
    "account update",
    "agent",
    "agent list",
    "agent read",
    "agentpool create",
    "agentpool delete",
    "agentpool list",
    "agentpool read",
    "agentpool token-create",
    "agentpool token-delete",
    "agentpool token-list",
    "agentpool update",
    "apply",
    "apply logs",
    "apply read",
    "assessmentresult",
    "assessmentresult list",
    "assessmentresult read",
    "audittrail",
    "audittrail list",
    "audittrail read",
    "audittrail token",
    "audittrail token create",
    "audittrail token delete",
    "audittrail token list",
    "audittrail token read",
    "awsoidc",
    "awsoidc create",
    "awsoidc delete",
    "awsoidc read",
    "awsoidc update",
    "azureoidc",
    "azureoidc create",
    "azureoidc delete",
    "azureoidc read",
    "azureoidc update",
    "changerequest",
    "changerequest create",
    "changerequest list",
    "changerequest read",
    "changerequest update",
    "comment",
    "comment create",
    "comment list",
    "comment read",
    "config",
    "configversion",
    "configversion create",
    "configversion list",
    "configversion read",
    "configversion upload",
    "costestimate",
    "costestimate read",
    "explorer",
    "explorer query",
    "featureset",
    "featureset list",
    "gcpoidc",
    "gcpoidc create",
    "gcpoidc delete",
    "gcpoidc read",
    "gcpoidc update",
    "githubapp",
    "githubapp list",
    "githubapp read",
    "gpgkey",
    "gpgkey create",
    "gpgkey delete",
    "gpgkey list",
    "gpgkey read",
    "gpgkey update",
    "hyok",
    "hyok create",
    "hyok delete",
    "hyok list",
    "hyok read",
    "hyok update",
    "hyokkey",
    "hyokkey create",
    "hyokkey delete",
    "hyokkey read",
    "iprange",
    "iprange list",
    "login",
    "logout",
    "nocode",
    "nocode create",
    "nocode list",
    "nocode read",
    "nocode update",
    "notification",
    "notification create",
    "notification delete",
    "notification list",
    "notification read",
    "notification update",
    "notification verify",
    "oauthclient",
    "oauthclient create",
    "oauthclient delete",
    "oauthclient list",
    "oauthclient read",
    "oauthclient update",
    "oauthtoken",
    "oauthtoken delete",
    "oauthtoken list",
    "oauthtoken read",
    "oauthtoken update",
    "organization",
    "organization create",
    "organization delete",
    "organization list",
    "organization member",
    "organization member read",
    "organization membership",
    "organization membership create",
    "organization membership delete",
    "organization membership list",
    "organization membership read",
    "organization show",
    "organization tag",
    "organization tag create",
    "organization tag delete",
    "organization tag list",
    "organization token",
    "organization token create",
    "organization token delete",
    "organization token list",
    "organization token read",
    "organization update",
    "organization:context",
    "plan",
    "plan logs",
    "plan read",
    "planexport",
    "planexport create",
    "planexport delete",
    "planexport download",
    "planexport read",
    "policy",
    "policy create",
    "policy delete",
    "policy list",
    "policy read",
    "policy update",
    "policycheck",
    "policycheck list",
    "policycheck override",
    "policycheck read",
    "policyevaluation",
    "policyevaluation list",
    "policyset",
    "policyset add-policy",
    "policyset create",
    "policyset delete",
    "policyset list",
    "policyset outcome",
    "policyset outcome list",
    "policyset outcome read",
    "policyset parameter",
    "policyset parameter create",
    "policyset parameter delete",
    "policyset parameter list",
    "policyset parameter update",
    "policyset read",
    "policyset remove-policy",
    "policyset update",
    "project",
    "project create",
    "project delete",
    "project list",
    "project read",
    "project teamaccess",
    "project teamaccess create",
    "project teamaccess delete",
    "project teamaccess list",
    "project teamaccess read",
    "project teamaccess update",
    "project update",
    "publicregistry",
    "publicregistry module",
    "publicregistry policy",
    "publicregistry policy list",
    "publicregistry provider",
    "publicregistry provider versions",
    "queryrun",
    "queryrun list",
    "queryworkspace",
    "queryworkspace list",
    "registry",
    "registry module create",
    "registry module delete",
    "registry module list",
    "registry module read",
    "registry module version create",
    "registry module version delete",
    "registry provider create",
    "registry provider delete",
    "registry provider list",
    "registry provider platform create",
    "registry provider platform delete",
    "registry provider platform read",
    "registry provider read",
    "registry provider version create",
    "registry provider version delete",
    "registry provider version read",
    "reservedtagkey",
    "reservedtagkey create",
    "reservedtagkey delete",
    "reservedtagkey list",
    "reservedtagkey update",
    "route",
    "run",
    "run apply",
    "run cancel",
    "run create",
    "run discard",
    "run list",
    "run show",
    "runtask",
    "runtask attach",
    "runtask create",
    "runtask delete",
    "runtask detach",
    "runtask list",
    "runtask read",
    "runtask update",
    "runtrigger",
    "runtrigger create",
    "runtrigger delete",
    "runtrigger list",
    "runtrigger read",
    "sshkey",
    "sshkey create",
    "sshkey delete",
    "sshkey list",
    "sshkey read",
    "sshkey update",
    "stabilitypolicy",
    "stabilitypolicy read",
    "stack",
    "stack configuration create",
    "stack configuration delete",
    "stack configuration list",
    "stack configuration read",
    "stack configuration update",
    "stack create",
    "stack delete",
    "stack deployment create",
    "stack deployment list",
    "stack deployment read",
    "stack list",
    "stack read",
    "stack state list",
    "stack state read",
    "stack update",
    "state",
    "state download",
    "state list",
    "state outputs",
    "state read",
    "subscription",
    "subscription list",
    "subscription read",
    "team",
    "team access",
    "team access create",
    "team access delete",
    "team access list",
    "team access read",
    "team access update",
    "team add-member",
    "team create",
    "team delete",
    "team list",
    "team remove-member",
    "team show",
    "team token",
    "team token create",
    "team token delete",
    "team token list",
    "team token read",
    "user read",
    "user token",
    "user token create",
    "user token delete",
    "user token list",
    "user token read",
    "variable",
    "variable create",
    "variable delete",
    "variable list",
    "variable update",
    "variableset",
    "variableset apply",
    "variableset create",
    "variableset delete",
    "variableset list",
    "variableset read",
    "variableset update",
    "variableset variable create",
    "variableset variable delete",
    "variableset variable list",
    "variableset variable update",
    "vaultoidc",
    "vaultoidc create",
    "vaultoidc delete",
    "vaultoidc read",
    "vaultoidc update",
    "vcsevent",
    "vcsevent list",
    "vcsevent read",
    "version",
    "whoami",
    "workspace",
    "workspace create",
    "workspace delete",
    "workspace list",
    "workspace read",
    "workspace resource",
    "workspace resource list",
    "workspace resource read",
    "workspace tag",
    "workspace tag add",
    "workspace tag list",
    "workspace tag remove",
    "workspace update",
    "workspace:context",
)


def command_paths() -> list[str]:
    """Return a copy of the catalog."""
    return list(COMMAND_PATHS)
