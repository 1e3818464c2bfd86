"""
Port-forward helper for the ECS Fargate bastion.

Looks up a running bastion task and opens an SSM port-forwarding session
through it with the AWS CLI.
"""
