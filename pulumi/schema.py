# mypy: disable-error-code="import-untyped"
"""
Generate architecture diagram.
"""

from diagrams import Cluster, Diagram, Edge
from diagrams.aws.compute import Lambda
from diagrams.aws.database import Dynamodb
from diagrams.aws.network import APIGateway
from diagrams.aws.security import Cognito
from diagrams.aws.storage import S3
from diagrams.generic.device import Mobile

graph_attr = {
    "layout": "dot",
    "splines": "curved",
    "bgcolor": "transparent",
    "beautify": "true",
    "center": "true",
}


with Diagram(
    "", show=False, direction="LR", graph_attr=graph_attr, filename="../assets/aijay"
):
    app = Mobile("AIJay iOS")
    with Cluster("AWS ap-southeast-2"):
        user_pool = Cognito("AIJay user pool")
        api_gw = APIGateway("HTTP API")
        api = Lambda("api handler")
        users = Dynamodb("Users")
        sessions = Dynamodb("Sessions")
        bucket = S3("data bucket")

    app >> Edge(label="sign in (hosted UI)") >> user_pool
    app >> Edge(label="GET /ping") >> api_gw
    api_gw >> Edge(label="invoke lambda") >> api
    api >> Edge(label="read/write") >> users
    api >> Edge(label="read/write") >> sessions
    api >> Edge(label="read/write") >> bucket
